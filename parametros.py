"""Parametros globales del proyecto."""

from __future__ import annotations

import logging
import os

APP_TITLE = "E-Commerce Product Management"
DEFAULT_API_BASE_URL = "http://localhost:3000/products"
API_BASE_URL = os.environ.get("PRODUCTS_API_URL", DEFAULT_API_BASE_URL)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
