"""azfootprint - interactive Azure VM drill-down CLI

Philosophy:
- Ruthless simplicity
- Thin layer over the Azure SDK
- Security by design (no credentials in code)
- Fail fast with helpful guidance

Walks subscriptions, resource groups and virtual machines through numbered
menus and prints the details of the selected VM.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
