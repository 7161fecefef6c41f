"""
Configuración del cliente de contenido de WordPress
Lee las variables de entorno una sola vez al importar el módulo
"""

import os
from dotenv import load_dotenv

# Cargar variables de entorno
load_dotenv()

DEFAULT_WP_URL = 'https://your-site.wordpress.com'
DEFAULT_TIMEOUT = 30.0


def read_timeout(value):
    """Segundos de timeout; el default si falta o no es un número"""
    if not value:
        return DEFAULT_TIMEOUT
    try:
        return float(value)
    except ValueError:
        return DEFAULT_TIMEOUT


# Sin validación: si falta WP_URL se usa el placeholder en silencio
WP_URL = (os.getenv('WP_URL') or DEFAULT_WP_URL).rstrip('/')
API_BASE = f"{WP_URL}/wp-json/wp/v2"

WP_TIMEOUT = read_timeout(os.getenv('WP_TIMEOUT'))
PORT = int(os.getenv('PORT', 8000))
