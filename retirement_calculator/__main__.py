#setup: python -m venv .venv
#setup: source .venv/bin/activate   # (windows: .venv\Scripts\activate)
#setup: pip install -e ".[test]"
#setup: python -m retirement_calculator   (or: flask --app retirement_calculator.app run --debug)

from retirement_calculator.app import create_app

app = create_app()


if __name__ == "__main__":
    app.run(port=app.config["PORT"], debug=app.config.get("DEBUG", False))
