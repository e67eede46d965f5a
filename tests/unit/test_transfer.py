import pytest

from byte_efficiency.domain.models import NetworkRecord, ResourceType
from byte_efficiency.estimators.transfer import estimate_transfer_size


def _record(transfer_size, resource_size=0, resource_type=ResourceType.SCRIPT):
    return NetworkRecord(
        url="https://example.com/app.js",
        transfer_size=transfer_size,
        resource_size=resource_size,
        resource_type=resource_type,
    )


@pytest.mark.parametrize(
    "resource_type,expected",
    [
        (ResourceType.STYLESHEET, 200),
        (ResourceType.SCRIPT, 330),
        (ResourceType.DOCUMENT, 330),
        (ResourceType.OTHER, 500),
    ],
)
def test_missing_record_uses_gzip_guess(resource_type, expected):
    assert estimate_transfer_size(None, 1000, resource_type) == expected


def test_standalone_resource_uses_transfer_size():
    record = _record(1234, resource_size=5000)
    assert estimate_transfer_size(record, 9999, ResourceType.SCRIPT) == 1234


def test_inlined_resource_borrows_compression_ratio():
    record = _record(500, resource_size=2000, resource_type=ResourceType.DOCUMENT)
    assert estimate_transfer_size(record, 1000, ResourceType.SCRIPT) == 250


def test_untyped_record_is_treated_as_inlined():
    record = _record(300, resource_size=600, resource_type=None)
    assert estimate_transfer_size(record, 1000, ResourceType.SCRIPT) == 500


@pytest.mark.parametrize("transfer_size,resource_size", [(500, 0), (0, 2000), (0, 0)])
def test_unknown_compression_ratio_falls_back_to_content_size(
    transfer_size, resource_size
):
    record = _record(
        transfer_size, resource_size=resource_size, resource_type=ResourceType.DOCUMENT
    )
    assert estimate_transfer_size(record, 1000, ResourceType.SCRIPT) == 1000
