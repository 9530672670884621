from flask import Blueprint

api_bp = Blueprint("api", __name__)

# Import route modules so they register with api_bp
from . import health
from . import auth
from . import users
from . import pages
from . import categories
from . import products
from . import news
from . import content
from . import faq
from . import navigation
from . import homepage
from . import legal
from . import downloads
from . import media
from . import uploads
from . import contact
from . import settings
from . import social_media
from . import seo
