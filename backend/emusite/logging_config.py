from logging.config import dictConfig


def configure_logging(app):
    """
    Route every logger (app, SQLAlchemy, werkzeug) through the WSGI error
    stream with one format. Level comes from LOG_LEVEL.
    """
    dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "[%(asctime)s] %(levelname)s in %(module)s: %(message)s",
            }
        },
        "handlers": {
            "wsgi": {
                "class": "logging.StreamHandler",
                "stream": "ext://flask.logging.wsgi_errors_stream",
                "formatter": "default",
            }
        },
        "root": {
            "level": app.config.get("LOG_LEVEL", "INFO"),
            "handlers": ["wsgi"],
        },
    })
