# storefront/extensions.py
from flask import current_app
from flask_cors import CORS

cors = CORS()

def get_store():
    """The Store instance owned by the running app."""
    return current_app.extensions["store"]
