"""Setting titles used as message titles."""

import re

_SERVER_KEY_RE = re.compile(r"^Servers/\d+/")

DESCRIPTIONS = {
    "AllowArbitraryServer": "Allow login to any MySQL server",
    "blowfish_secret": "Blowfish secret",
    "LoginCookieValidity": "Login cookie validity",
    "LoginCookieStore": "Login cookie store",
    "SaveDir": "Save directory",
    "TempDir": "Temporary directory",
    "ZipDump": "ZIP",
    "GZipDump": "GZip",
    "BZipDump": "Bzip2",
    "Servers/1/ssl": "Use SSL",
    "Servers/1/auth_type": "Authentication type",
    "Servers/1/AllowRoot": "Allow root login",
    "Servers/1/AllowNoPassword": "Allow logins without a password",
}


def get_description(key: str) -> str:
    """Return the title for a configuration key.

    Server keys share one description, so 'Servers/3/ssl' resolves the same
    as 'Servers/1/ssl'. Unknown keys are returned as-is.
    """
    normalized = _SERVER_KEY_RE.sub("Servers/1/", key)
    return DESCRIPTIONS.get(normalized, key)
