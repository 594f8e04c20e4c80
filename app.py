from dotenv import load_dotenv
load_dotenv()

from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix

from config import Config
from core.extension import Responsable


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # Trust one proxy hop for client IP and scheme (X-Forwarded-For / -Proto)
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1)

    app.responsable = Responsable(app)
    app.logger.debug('Responsable helpers registered')

    return app


if __name__ == '__main__':
    app = create_app()
    app.run(debug=True, host='0.0.0.0', port=5000)
