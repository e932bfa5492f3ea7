import os

from src.student_records.student_records.main import create_app

app = create_app()

if __name__ == "__main__":
    # Reloader would start the report scheduler twice
    app.run(
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8080")),
        debug=app.config["DEBUG"],
        use_reloader=False,
        threaded=True,
    )
