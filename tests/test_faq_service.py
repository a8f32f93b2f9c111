import pytest
from pydantic import ValidationError


def _faq(n: int, **overrides) -> dict:
    data = {
        "question_it": f"Domanda {n}",
        "question_en": f"Question {n}",
        "answer_it": f"Risposta **{n}**",
        "answer_en": f"Answer **{n}**",
    }
    data.update(overrides)
    return data


@pytest.fixture
def service(container):
    return container.faq_service


async def test_new_faqs_append_to_the_end(service):
    first = await service.create_faq(_faq(1))
    second = await service.create_faq(_faq(2))
    third = await service.create_faq(_faq(3))
    assert (first.position, second.position, third.position) == (0, 1, 2)


async def test_explicit_position_kept(service):
    faq = await service.create_faq(_faq(1, position=7))
    assert faq.position == 7


async def test_public_faqs_only_active_in_order(service):
    a = await service.create_faq(_faq(1, position=2))
    await service.create_faq(_faq(2, position=1, is_active=False))
    c = await service.create_faq(_faq(3, position=0))

    faqs = await service.public_faqs("en")

    assert [f["id"] for f in faqs] == [c.id, a.id]
    assert faqs[0] == {"id": c.id, "question": "Question 3", "answer": "Answer **3**", "position": 0}


async def test_create_requires_both_languages(service):
    with pytest.raises(ValidationError):
        await service.create_faq(_faq(1, answer_en="  "))


async def test_toggle_hides_and_shows(service):
    faq = await service.create_faq(_faq(1))
    assert len(await service.public_faqs("it")) == 1

    toggled = await service.toggle_faq(faq.id)
    assert toggled.is_active is False
    assert await service.public_faqs("it") == []

    toggled = await service.toggle_faq(faq.id)
    assert toggled.is_active is True
    assert len(await service.public_faqs("it")) == 1


async def test_toggle_missing(service):
    assert await service.toggle_faq("missing") is None


async def test_update_sets_updated_at(service):
    faq = await service.create_faq(_faq(1))
    updated = await service.update_faq(faq.id, {"question_en": "Who are we?"})
    assert updated.question_en == "Who are we?"
    assert updated.question_it == "Domanda 1"
    assert updated.updated_at is not None


async def test_delete(service):
    faq = await service.create_faq(_faq(1))
    assert await service.delete_faq(faq.id) is True
    assert await service.list_faqs() == []
