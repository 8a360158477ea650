# lobianco/__init__.py

import logging
import os

from flask import Flask, render_template
from flask_login import LoginManager

from config import Config

logger = logging.getLogger(__name__)

login_manager = LoginManager()
login_manager.login_view = 'auth.login'
login_manager.login_message = 'Digite a senha para acessar a área de gestão.'
login_manager.login_message_category = 'info'


@login_manager.user_loader
def load_user(user_id):
    from database import get_db_session
    from lobianco.errors import StoreUnavailableError
    from lobianco.models import User

    try:
        with get_db_session() as s:
            return s.get(User, int(user_id))
    except StoreUnavailableError:
        logger.warning("Cannot load session user: database not available")
        return None


def create_app(config_class=Config):
    logging.basicConfig(level=getattr(logging, str(config_class.LOG_LEVEL).upper(), logging.INFO))
    logger.info("Starting Flask app creation...")

    template_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'templates'))
    static_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'static'))

    app = Flask(__name__, template_folder=template_dir, static_folder=static_dir)
    app.config.from_object(config_class)

    # database imports lobianco.errors, so it is bound here rather than at module level
    from database import init_db
    init_db(app)
    login_manager.init_app(app)

    from lobianco.utils import format_brl, whatsapp_link
    app.add_template_filter(format_brl, 'brl')
    app.add_template_filter(whatsapp_link, 'whatsapp_link')

    from lobianco.admin.routes import admin_bp
    from lobianco.api.routes import api_bp
    from lobianco.auth.routes import auth_bp
    from lobianco.public.routes import public_bp

    app.register_blueprint(public_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(admin_bp)
    app.register_blueprint(api_bp)
    logger.info("All blueprints registered successfully")

    @app.errorhandler(404)
    def not_found(error):
        return render_template('errors/404.html'), 404

    @app.context_processor
    def inject_globals():
        return dict(site_title=app.config['SITE_TITLE'])

    logger.info("Flask app creation completed successfully")
    return app
