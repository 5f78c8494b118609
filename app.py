"""Development entry point: `python app.py` serves the JSON API."""

from src.shiftpay.shiftpay.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(debug=app.config.get("DEBUG", False), use_reloader=False)
