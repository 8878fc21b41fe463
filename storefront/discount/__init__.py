from flask import Blueprint

bp = Blueprint("discount", __name__, url_prefix="/api/discount")

from . import routes  # noqa: E402,F401
