from __future__ import annotations

from django.test import RequestFactory, SimpleTestCase, TestCase, override_settings

from apps.blocks.listing import FilterHandler, Listing
from apps.blocks.models.item import Item

from .utils import make_spec


class FilterHandlerTests(SimpleTestCase):
    def test_lookup_prefers_declared_lookup(self):
        handler = FilterHandler("code", {"key": "code", "field": "code", "lookup": "istartswith"})
        self.assertEqual(handler.lookup(), "code__istartswith")

    def test_lookup_defaults_by_type(self):
        self.assertEqual(FilterHandler("code", {"type": "text"}).lookup(), "code__icontains")
        self.assertEqual(FilterHandler("status", {"type": "select", "field": "state"}).lookup(), "state__exact")

    def test_label_is_optional(self):
        self.assertIsNone(FilterHandler("code", {"exposed": True}).label)
        self.assertEqual(FilterHandler("code", {"label": "Code"}).label, "Code")


class ListingExposedInputTests(SimpleTestCase):
    def setUp(self):
        self.factory = RequestFactory()
        self.spec = make_spec()

    def test_filter_handlers_keep_schema_order(self):
        handlers = Listing(self.spec).get_filter_handlers()
        self.assertEqual(list(handlers), ["code", "status", "hide_obsolete"])
        self.assertTrue(handlers["code"].is_exposed)
        self.assertFalse(handlers["hide_obsolete"].is_exposed)

    def test_request_input_reads_prefixed_and_bare_keys(self):
        request = self.factory.get("/", {"filters.code": "AB", "status": "active", "hide_obsolete": "no"})
        listing = Listing(self.spec, request=request)
        self.assertEqual(listing.get_exposed_input(), {"code": "AB", "status": "active"})

    def test_empty_request_values_are_ignored(self):
        request = self.factory.get("/", {"filters.code": "", "code": "CD"})
        self.assertEqual(Listing(self.spec, request=request).get_exposed_input(), {"code": "CD"})

    @override_settings(BLOCKS_EXPOSED_INPUT_PREFIX="f_")
    def test_prefix_is_configurable(self):
        request = self.factory.get("/", {"f_code": "AB"})
        self.assertEqual(Listing(self.spec, request=request).get_exposed_input(), {"code": "AB"})

    def test_assigned_input_replaces_request_input(self):
        request = self.factory.get("/", {"filters.code": "AB"})
        listing = Listing(self.spec, request=request)
        listing.set_exposed_input({})
        self.assertEqual(listing.get_exposed_input(), {})


class ListingExecuteTests(TestCase):
    def setUp(self):
        Item.objects.create(code="AB-100", description="Bolt", status=Item.Status.ACTIVE)
        Item.objects.create(code="AB-200", description="Nut", status=Item.Status.BLOCKED)
        Item.objects.create(code="CD-300", description="Washer", status=Item.Status.ACTIVE)
        Item.objects.create(code="AB-900", description="Old bolt", status=Item.Status.OBSOLETE)
        self.spec = make_spec()

    def test_fixed_filter_always_applies(self):
        result = Listing(self.spec).execute()
        self.assertEqual([row["code"] for row in result.rows], ["AB-100", "AB-200", "CD-300"])
        self.assertEqual(result.total, 3)

    def test_exposed_input_filters_rows(self):
        listing = Listing(self.spec)
        listing.set_exposed_input({"code": "ab", "status": "active"})
        result = listing.execute()
        self.assertEqual(result.rows, [{"code": "AB-100", "status": "active"}])
        self.assertEqual(result.exposed_input, {"code": "ab", "status": "active"})

    def test_unknown_input_keys_have_no_effect(self):
        listing = Listing(self.spec)
        listing.set_exposed_input({"removed": "x"})
        self.assertEqual(listing.execute().total, 3)

    def test_items_per_page_limits_rows_not_total(self):
        listing = Listing(self.spec, items_per_page=2)
        result = listing.execute()
        self.assertEqual(len(result.rows), 2)
        self.assertEqual(result.total, 3)
        self.assertEqual(result.items_per_page, 2)
