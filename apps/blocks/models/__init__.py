from apps.blocks.models.block import Block
from apps.blocks.models.item import Item
from apps.blocks.models.layout import Layout
from apps.blocks.models.layout_block import LayoutBlock
__all__ = [
    "Block",
    "Item",
    "Layout",
    "LayoutBlock",
]
