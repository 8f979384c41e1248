# app.py
# Ponto de entrada da aplicação Flask que expõe a geração de boletos.

import logging

from flask import Flask

from boletos import init_app as init_boletos
from config import LOG_LEVEL, SECRET_KEY


def create_app():
    app = Flask(__name__)
    app.config["SECRET_KEY"] = SECRET_KEY
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.logger.setLevel(LOG_LEVEL)
    init_boletos(app)
    return app


app = create_app()


if __name__ == "__main__":
    app.run(debug=True)
