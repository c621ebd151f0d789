import requests


def init_supabase(app):
    """Create the shared PostgREST session carrying the service credential.

    The key is only ever sent to the backend; it never appears in a response.
    """
    key = app.config["SUPABASE_SERVICE_KEY"]
    session = requests.Session()
    session.headers.update({
        "apikey": key,
        "Authorization": f"Bearer {key}",
        # single object instead of an array; zero or many rows -> 406
        "Accept": "application/vnd.pgrst.object+json",
    })
    app.extensions["supabase"] = {
        "session": session,
        "base_url": app.config["SUPABASE_URL"].rstrip("/"),
        "timeout": app.config.get("BACKEND_TIMEOUT", (5, 10)),
    }
