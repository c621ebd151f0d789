import logging
import os
from dotenv import load_dotenv
from limelight import create_app


def run():
    # Load environment from .env so config picks up SUPABASE_URL, the service key, etc.
    load_dotenv()
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app("config.Config")

    host = os.getenv("HOST", "127.0.0.1")
    port = int(os.getenv("PORT", "8788"))
    debug = bool(int(os.getenv("FLASK_DEBUG", "0")))
    app.run(host=host, port=port, debug=debug, use_reloader=debug, threaded=True)


if __name__ == "__main__":
    run()
