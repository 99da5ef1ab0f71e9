import pytest

from tfmoddocs.resource import Resource, sort_resources_by_type
from tfmoddocs.types import String


def test_resource_spec():
    resource = Resource(
        type="private_key",
        name="baz",
        provider_name="tls",
        provider_source="hashicorp/tls",
        mode="managed",
        version=String("latest"),
    )
    assert resource.spec() == "tls_private_key.baz"


@pytest.mark.parametrize(
    "resource, expected",
    [
        (Resource("private_key", "", "tls", "hashicorp/tls", "managed", String("latest")), "resource"),
        (Resource("caller_identity", "", "aws", "hashicorp/aws", "data", String("latest")), "data source"),
        (Resource("caller_identity", "", "aws", "hashicorp/aws", "", String("latest")), "invalid"),
    ],
)
def test_resource_mode(resource, expected):
    assert resource.get_mode() == expected


def test_resource_url_generic():
    resource = Resource("private_key", "", "tls", "hashicorp/tls", "managed", String("latest"))
    assert resource.url() == "https://registry.terraform.io/providers/hashicorp/tls/latest/docs/resources/private_key"


def test_resource_url_cannot_be_built():
    resource = Resource("custom", "", "nih", "http://nih.tld/some/path/to/provider/source", "managed", String("latest"))
    assert resource.url() == ""


def test_resource_url_invalid_mode():
    resource = Resource("custom", "", "tls", "hashicorp/tls", "", String("latest"))
    assert resource.url() == ""


def _sample():
    return [
        Resource("e", "d", "c", "hashicorp/e", "managed", String("1.5.0")),
        Resource("e", "c", "c", "hashicorp/e", "managed", String("1.5.0")),
        Resource("e_x", "d", "c", "hashicorp/e", "managed", String("1.5.0")),
        Resource("e_x", "c", "c", "hashicorp/e", "managed", String("1.5.0")),
        Resource("a", "a", "a", "hashicorp/a", "managed", String("1.1.0")),
        Resource("d", "d", "b", "hashicorp/d", "managed", String("1.4.0")),
        Resource("b", "b", "b", "hashicorp/b", "managed", String("1.2.0")),
        Resource("c", "c", "c", "hashicorp/c", "managed", String("1.3.0")),
        Resource("f", "f", "a", "hashicorp/f", "managed", String("1.6.0")),
        Resource("z", "z", "z", "hashicorp/a", "managed", String("1.5.0")),
        Resource("z", "z", "z", "hashicorp/a", "data", String("1.5.0")),
        Resource("a", "a", "a", "hashicorp/a", "data", String("1.5.0")),
        Resource("z", "z", "z", "hashicorp/a", "", String("1.5.0")),
        Resource("a", "a", "a", "hashicorp/a", "", String("1.5.0")),
    ]


def test_resources_sorted_by_type():
    expected = [
        "a_a.a", "a_f.f", "b_b.b", "b_d.d", "c_c.c", "c_e.c", "c_e.d",
        "c_e_x.c", "c_e_x.d", "z_z.z", "a_a.a", "z_z.z", "a_a.a", "z_z.z",
    ]
    assert [r.spec() for r in sort_resources_by_type(_sample())] == expected


def test_resources_sorted_by_type_and_mode():
    suffix = {"managed": " (r)", "data": " (d)"}
    expected = [
        "a_a.a (r)", "a_f.f (r)", "b_b.b (r)", "b_d.d (r)", "c_c.c (r)", "c_e.c (r)", "c_e.d (r)",
        "c_e_x.c (r)", "c_e_x.d (r)", "z_z.z (r)", "a_a.a (d)", "z_z.z (d)", "a_a.a", "z_z.z",
    ]
    actual = [r.spec() + suffix.get(r.mode, "") for r in sort_resources_by_type(_sample())]
    assert actual == expected