# --- storefront/utils/api.py ---

def api_ok(message, data=None):
    return {
        "message": message,
        **(data or {}),
    }

def api_error(message, data=None):
    return {
        "error": True,
        "message": message,
        **(data or {}),
    }
