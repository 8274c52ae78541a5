"""Optional integrations offered by ddlbind init."""

from ddlbind.integrations.ops import add_integrations, install_foundations

__all__ = ["add_integrations", "install_foundations"]
