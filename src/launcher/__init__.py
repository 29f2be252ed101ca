"""Terasology launcher configuration core.

Entry points: :class:`launcher.config.ConfigStore` for the process-wide
configuration and :func:`launcher.app.create_app` for application wiring.
"""

__version__ = "0.1.0"
