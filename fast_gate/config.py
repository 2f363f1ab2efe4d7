import os

# Attribute of quart's `g` holding the authenticated principal
GATE_PRINCIPAL_KEY = os.getenv("GATE_PRINCIPAL_KEY", "user")

# Package scanned for @policy decorated classes during autodiscovery
GATE_POLICIES_PACKAGE = os.getenv("GATE_POLICIES_PACKAGE", "app.policies")
