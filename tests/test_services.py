import pytest

from sendcloud.core.errors import ValidationFailure
from sendcloud.services import MODULES, Labels, ParcelStatuses, Parcels, resolve_module


def test_multiple_pdf_without_ids_fails_before_sending(api, transport):
    with pytest.raises(ValidationFailure) as excinfo:
        api.labels.get_multiple_pdf({})
    assert excinfo.value.field == "ids"
    assert str(excinfo.value) == "Please provide parcel ids array."
    assert transport.calls == []


@pytest.mark.parametrize(
    "module, method, args, field",
    [
        ("labels", "get_multiple", ({},), "label"),
        ("labels", "get_multiple_pdf_specific", ({"ids": None},), "ids"),
        ("customs_declarations", "get_multiple_pdf", (), "ids"),
        ("parcels", "update", ({"name": "no id"},), "id"),
        ("transit_times", "get_shipping_method", ({"shipping_method_code": "postnl:standard"},), "shipping_method_code"),
    ],
)
def test_required_field_validation(api, transport, module, method, args, field):
    with pytest.raises(ValidationFailure) as excinfo:
        getattr(api.module(module), method)(*args)
    assert excinfo.value.field == field
    assert transport.calls == []


@pytest.mark.parametrize(
    "call, verb, path",
    [
        (lambda api: api.checkout.get("cfg-1"), "GET", "/api/v2/checkout/configurations/cfg-1/delivery-options"),
        (lambda api: api.customs_declarations.get("5"), "GET", "/api/v2/customs_declaration/normal_printer/5"),
        (lambda api: api.customs_declarations.get_multiple_pdf({"ids": [5, 6]}), "GET", "/api/v2/customs_declaration/normal_printer"),
        (lambda api: api.labels.get("5"), "GET", "/api/v2/labels/5"),
        (lambda api: api.labels.get_multiple({"label": {"parcels": [5]}}), "POST", "/api/v2/labels"),
        (lambda api: api.labels.get_pdf("5"), "GET", "/api/v2/labels/normal_printer/5"),
        (lambda api: api.labels.get_multiple_pdf({"ids": [5]}), "GET", "/api/v2/labels/normal_printer"),
        (lambda api: api.labels.get_pdf_specific("5"), "GET", "/api/v2/labels/label_printer/5"),
        (lambda api: api.labels.get_multiple_pdf_specific({"ids": [5]}), "GET", "/api/v2/labels/label_printer"),
        (lambda api: api.parcel_documents.get("5", "cn23"), "GET", "/api/v2/parcels/5/documents/cn23"),
        (lambda api: api.parcel_statuses.get(), "GET", "/api/v2/parcels/statuses"),
        (lambda api: api.parcels.get("5"), "GET", "/api/v2/parcels/5"),
        (lambda api: api.parcels.list(), "GET", "/api/v2/parcels"),
        (lambda api: api.parcels.create({"parcel": {"name": "A"}}), "POST", "/api/v2/parcels"),
        (lambda api: api.parcels.update({"id": 5, "name": "B"}), "PUT", "/api/v2/parcels"),
        (lambda api: api.parcels.delete("5"), "POST", "/api/v2/parcels/5/cancel"),
        (lambda api: api.parcels.get_return_portal_url("5"), "GET", "/api/v2/parcels/5/return_portal_url"),
        (lambda api: api.pickups.get("9"), "GET", "/api/v2/pickups/9"),
        (lambda api: api.pickups.create({"carrier": "dhl"}), "POST", "/api/v2/pickups"),
        (lambda api: api.pickups.list(), "GET", "/api/v2/pickups"),
        (lambda api: api.shipping_methods.list(), "GET", "/api/v2/shipping_methods"),
        (lambda api: api.shipping_methods.get("8"), "GET", "/api/v2/shipping_methods/8"),
        (lambda api: api.shipping_prices.get({"shipping_method_id": 8}), "GET", "/api/v2/shipping-price"),
        (lambda api: api.shipping_products.list(), "GET", "/api/v2/shipping-products"),
        (lambda api: api.tracking.get("3S123"), "GET", "/api/v2/tracking/3S123"),
        (lambda api: api.transit_times.get_carriers(), "GET", "/api/v2/insights/carriers/transit-times"),
        (
            lambda api: api.transit_times.get_shipping_method({"shipping_method_code": ["postnl:standard"]}),
            "GET",
            "/api/v2/insights/shipping-methods/transit-times",
        ),
    ],
)
def test_endpoint_paths_and_verbs(api, transport, call, verb, path):
    call(api)
    assert transport.last["method"] == verb
    assert transport.last["uri"].split("?")[0] == "https://panel.sendcloud.sc" + path


def test_downloads_accept_absolute_urls(api, transport):
    transport.reply(200, body=b"%PDF")
    url = "https://panel.sendcloud.sc/api/v2/labels/normal_printer/5?start_from=0"
    response = api.downloads.get(url)
    assert response.body == b"%PDF"
    assert transport.last["uri"] == url
    assert transport.last["options"]["headers"]["Accept"] == "application/pdf"


def test_registry_lookup():
    assert resolve_module("labels") is Labels
    assert resolve_module("parcelStatuses") is ParcelStatuses
    assert resolve_module("parcel-statuses") is ParcelStatuses
    assert set(MODULES) >= {"parcels", "labels", "tracking"}
    with pytest.raises(KeyError):
        resolve_module("invoices")


def test_client_attribute_access_uses_registry(api):
    assert isinstance(api.parcels, Parcels)
    assert api.parcels.client is api
    assert isinstance(api.module("Parcels"), Parcels)
    with pytest.raises(AttributeError):
        api.invoices


@pytest.mark.parametrize("name", ["parcelStatuses", "parcel_statuses", "ParcelStatuses"])
def test_client_attribute_access_accepts_name_variants(api, name):
    assert isinstance(getattr(api, name), ParcelStatuses)
