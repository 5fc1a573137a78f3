"""
WiFi Connector web interface.

Serves the credential form and the JSON API it talks to.
"""

from wificonnector.web.app import app, run_server

__all__ = ["app", "run_server"]
