"""
Installer service — layered like the rest of the tool-install code:

    data           recipes and constants (pure)
    detection      read-only checks: platform, presence, versions
    execution      side effects: subprocess, download, extract, profile
    orchestration  the installer flows tying the layers together

Package-manager backends live in ``devsetup.adapters``.
"""
