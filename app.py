from __future__ import annotations

from dotenv import load_dotenv

# Config reads the environment at import time
load_dotenv()

from brandix.app.factory import create_app  # noqa: E402

app = create_app()

if __name__ == "__main__":
    app.run(host=app.config["APP_HOST"], port=app.config["APP_PORT"], debug=True)
