from __future__ import annotations

from django.contrib.auth import get_user_model
from django.test import RequestFactory, TestCase

from apps.blocks import registry as block_registry
from apps.blocks.filters import fixed_filter, select_filter, text_filter
from apps.blocks.models.block import Block
from apps.blocks.models.item import Item
from apps.blocks.models.layout import Layout
from apps.blocks.models.layout_block import LayoutBlock
from apps.blocks.services.block_instances import ListingBlockInstance
from apps.blocks.specs import BlockSpec

SPEC_ID = "tests.items"


def make_spec(spec_id: str = SPEC_ID, display: str = "exposed_filter_block") -> BlockSpec:
    return BlockSpec(
        id=spec_id,
        name="Test Items",
        model=Item,
        display=display,
        filter_schema=(
            text_filter("code", label="Item code", lookup="istartswith"),
            select_filter("status", choices=Item.Status.choices),
            fixed_filter("hide_obsolete", Item.Status.OBSOLETE, field="status", negate=True),
        ),
        columns=("code", "status"),
        ordering=("code",),
    )


class ListingBlockTestCase(TestCase):
    """Registers a test listing and creates layout blocks pointing at it."""

    spec_id = SPEC_ID
    display = "exposed_filter_block"

    @classmethod
    def setUpClass(cls):
        super().setUpClass()
        block_registry.unregister(cls.spec_id)
        block_registry.register(make_spec(cls.spec_id, cls.display))

    @classmethod
    def tearDownClass(cls):
        try:
            block_registry.unregister(cls.spec_id)
        finally:
            super().tearDownClass()

    def setUp(self):
        self.factory = RequestFactory()
        self.owner = get_user_model().objects.create_user(
            username="layout-owner",
            email="owner@example.com",
            password="pass",
        )
        self.layout = Layout.objects.create(owner=self.owner, name="Dashboard", slug="dashboard")

    def make_block(self, options=None) -> Block:
        block, _ = Block.objects.update_or_create(
            code=self.spec_id,
            defaults={"name": "Test Items", "options": options or {}},
        )
        return block

    def make_layout_block(self, configuration=None, options=None, slug=None) -> LayoutBlock:
        slug = slug or f"items-{LayoutBlock.objects.count() + 1}"
        return LayoutBlock.objects.create(
            layout=self.layout,
            block=self.make_block(options),
            slug=slug,
            configuration=configuration if configuration is not None else {},
        )

    def make_instance(self, configuration=None, options=None, request=None) -> ListingBlockInstance:
        layout_block = self.make_layout_block(configuration, options)
        return ListingBlockInstance(layout_block, request=request)

    def submit(self, instance: ListingBlockInstance, data):
        form = instance.configuration_form(data)
        self.assertTrue(form.is_valid(), form.errors)
        instance.submit(form)
        return form

    def create_items(self):
        Item.objects.create(code="AB-100", description="Bolt", status=Item.Status.ACTIVE)
        Item.objects.create(code="AB-200", description="Nut", status=Item.Status.BLOCKED)
        Item.objects.create(code="CD-300", description="Washer", status=Item.Status.ACTIVE)
        Item.objects.create(code="AB-900", description="Old bolt", status=Item.Status.OBSOLETE)
