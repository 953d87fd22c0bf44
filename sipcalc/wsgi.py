#setup: python -m venv .venv
#setup: source .venv/bin/activate   # (windows: .venv\Scripts\activate)
#setup: pip install -U pip -e .
#setup: flask --app sipcalc.wsgi run --port 5000 --debug

from sipcalc.app import create_app

app = create_app()


def main() -> None:
    settings = app.config["SETTINGS"]
    app.run(port=settings.port, debug=settings.env == "dev")


if __name__ == "__main__":
    main()
