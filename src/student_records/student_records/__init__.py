"""Student Records package.

Organized by feature modules (students, attendance, reports) with a thin Flask
controller layer over service/repository layers.
"""
