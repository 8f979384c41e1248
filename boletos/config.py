# boletos/config.py
# Parâmetros da geração de boletos, sobrescrevíveis por variáveis de ambiente.

import os
from datetime import date

# Data base do fator de vencimento (FEBRABAN). Fatores acima de 9999 reiniciam em 1000.
DUE_DATE_EPOCH = date.fromisoformat(os.environ.get('BOLETO_DUE_DATE_EPOCH', '1997-10-07'))

# Código da moeda no código de barras ('9' = Real)
CURRENCY_CODE = os.environ.get('BOLETO_CURRENCY_CODE', '9')

PLACE_OF_PAYMENT = os.environ.get(
    'BOLETO_PLACE_OF_PAYMENT', 'Pagável em qualquer banco até o vencimento'
)

# Geometria do código de barras ITF, em milímetros
ITF_MODULE_WIDTH = float(os.environ.get('BOLETO_ITF_MODULE_WIDTH', '0.33'))
ITF_HEIGHT = float(os.environ.get('BOLETO_ITF_HEIGHT', '13'))
