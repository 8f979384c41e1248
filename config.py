# config.py
# Este arquivo armazena as configurações da aplicação.
# Os parâmetros de geração de boletos ficam em boletos/config.py.

import os

# Chave secreta para sessões Flask
SECRET_KEY = os.environ.get('SECRET_KEY', 'sua_chave_secreta_aqui_substitua_por_uma_forte_e_aleatoria')

# Nível de log da aplicação (DEBUG, INFO, WARNING, ...)
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
