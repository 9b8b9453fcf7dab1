from apps.blocks.forms.block_config import BlockConfigurationForm
from apps.blocks.forms.states import VisibilityRule

__all__ = ["BlockConfigurationForm", "VisibilityRule"]
