"""Event handler and notification models, AES-GCM and pass-through encryption services, and configuration builders."""

__version__ = "0.1.0"