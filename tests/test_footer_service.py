import pytest
from pydantic import ValidationError

from core.domain.models import FooterResource
from core.services.footer_service import group_by_category


def _resource(title: str, category: str = "links", **overrides) -> dict:
    data = {
        "title_it": f"{title} IT",
        "title_en": f"{title} EN",
        "url": f"https://example.com/{title.lower()}",
        "category": category,
    }
    data.update(overrides)
    return data


@pytest.fixture
def service(container):
    return container.footer_service


def test_group_by_category_keeps_first_seen_order():
    resources = [
        FooterResource(id="1", title_it="Discord", title_en="Discord", url="u1", category="social", position=0),
        FooterResource(id="2", title_it="Regole", title_en="Rules", url="u2", category="links", position=1),
        FooterResource(id="3", title_it="Twitch", title_en="Twitch", url="u3", icon="Twitch", category="social", position=2),
    ]
    grouped = group_by_category(resources, "en")

    assert list(grouped) == ["social", "links"]
    assert [r["id"] for r in grouped["social"]] == ["1", "3"]
    assert grouped["links"][0]["title"] == "Rules"
    assert grouped["social"][1]["icon"] == "Twitch"


async def test_grouped_resources_active_only(service):
    await service.create_resource(_resource("Discord", "social", icon="MessageCircle"))
    await service.create_resource(_resource("Privacy", "legal", is_active=False))
    await service.create_resource(_resource("Rules", "links"))

    grouped = await service.grouped_resources("it")

    assert list(grouped) == ["social", "links"]
    assert grouped["social"][0]["title"] == "Discord IT"
    assert grouped["social"][0]["icon"] == "MessageCircle"


async def test_positions_are_assigned_in_creation_order(service):
    first = await service.create_resource(_resource("A"))
    second = await service.create_resource(_resource("B", "support"))
    assert (first.position, second.position) == (0, 1)


async def test_invalid_category_rejected(service):
    with pytest.raises(ValidationError):
        await service.create_resource(_resource("Blog", "blog"))


async def test_admin_listing_sorted_by_category_then_position(service):
    await service.create_resource(_resource("Twitter", "social", position=5))
    await service.create_resource(_resource("Rules", "links"))
    await service.create_resource(_resource("Discord", "social", position=0))

    resources = await service.list_resources()
    assert [(r.category, r.title_en) for r in resources] == [
        ("links", "Rules EN"),
        ("social", "Discord EN"),
        ("social", "Twitter EN"),
    ]


async def test_toggle_and_update(service):
    resource = await service.create_resource(_resource("Discord", "social"))

    toggled = await service.toggle_resource(resource.id)
    assert toggled.is_active is False
    assert await service.grouped_resources("it") == {}

    updated = await service.update_resource(resource.id, {"category": "support", "is_active": True})
    assert updated.category == "support"
    assert list(await service.grouped_resources("it")) == ["support"]


async def test_missing_resource(service):
    assert await service.toggle_resource("missing") is None
    assert await service.update_resource("missing", {"title_en": "x"}) is None
    assert await service.delete_resource("missing") is False
