"""Web interface for the calculator."""

from nightrelcalc.web.addresses import listen_urls, print_listen_addresses
from nightrelcalc.web.app import build_calc_url, create_app

__all__ = [
    "build_calc_url",
    "create_app",
    "listen_urls",
    "print_listen_addresses",
]
