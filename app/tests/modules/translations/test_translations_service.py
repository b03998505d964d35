import pytest

from infrastructure.i18n.errors import (
    RecordConflictError,
    RecordNotFoundError,
    StoreUnavailableError,
)
from infrastructure.i18n.models import Locale
from modules.translations import schemas, service
from tests.factories.i18n import make_record


def _create(key, locale, value, namespace=None):
    return schemas.TranslationCreateRequest(
        key=key, locale=locale, value=value, namespace=namespace
    )


@pytest.mark.asyncio
async def test_list_translations_sorted_by_locale_then_key(resolver):
    records = await service.list_translations(resolver)

    assert [(r.locale.value, r.key) for r in records] == [
        ("en", "nav.home"),
        ("fr", "footer.rights"),
        ("fr", "nav.aboutUs"),
    ]


@pytest.mark.asyncio
async def test_list_translations_filters(resolver):
    by_locale = await service.list_translations(resolver, locale=Locale.FR)
    by_namespace = await service.list_translations(resolver, namespace="footer")
    by_search = await service.list_translations(resolver, search="SOMMES")

    assert {r.key for r in by_locale} == {"footer.rights", "nav.aboutUs"}
    assert [r.key for r in by_namespace] == ["footer.rights"]
    assert [r.value for r in by_search] == ["Qui sommes-nous"]


@pytest.mark.asyncio
async def test_get_translation_missing_raises(resolver):
    with pytest.raises(RecordNotFoundError):
        await service.get_translation(resolver, Locale.DE, "nav.home")


@pytest.mark.asyncio
async def test_save_translation_invalidates_locale(resolver):
    before = await resolver.resolve("fr")
    assert before.get("nav.home") == "Accueil"

    record = await service.save_translation(
        resolver, _create("nav.home", "fr", "Maison")
    )

    assert record.namespace == "nav"
    assert record.created_at is not None
    assert resolver.cache.get(Locale.FR) is None
    assert (await resolver.resolve("fr")).get("nav.home") == "Maison"


@pytest.mark.asyncio
async def test_save_translation_keeps_other_locales_cached(resolver):
    await resolver.resolve("en")
    await resolver.resolve("fr")

    await service.save_translation(resolver, _create("nav.home", "fr", "Maison"))

    assert resolver.cache.get(Locale.EN) is not None
    assert resolver.cache.get(Locale.FR) is None


@pytest.mark.asyncio
async def test_save_translation_upsert_preserves_created_at(resolver):
    first = await service.save_translation(resolver, _create("nav.new", "en", "New"))
    second = await service.save_translation(
        resolver, _create("nav.new", "en", "Newer")
    )

    assert second.value == "Newer"
    assert second.created_at == first.created_at
    assert len(await service.list_translations(resolver, search="nav.new")) == 1


@pytest.mark.asyncio
async def test_save_translations_single_locale_invalidates_only_it(resolver):
    await resolver.resolve("en")
    await resolver.resolve("fr")

    saved = await service.save_translations(
        resolver,
        [
            _create("common.submit", "fr", "Valider"),
            _create("common.cancel", "fr", "Abandonner"),
        ],
    )

    assert len(saved) == 2
    assert resolver.cache.get(Locale.EN) is not None
    assert resolver.cache.get(Locale.FR) is None


@pytest.mark.asyncio
async def test_save_translations_across_locales_clears_cache(resolver):
    await resolver.resolve("en")
    await resolver.resolve("de")

    await service.save_translations(
        resolver,
        [
            _create("common.submit", "fr", "Valider"),
            _create("common.submit", "es", "Enviar"),
        ],
    )

    assert len(resolver.cache) == 0


@pytest.mark.asyncio
async def test_save_translations_invalidates_on_partial_failure(flaky_resolver):
    await flaky_resolver.resolve("fr")

    with pytest.raises(StoreUnavailableError):
        await service.save_translations(
            flaky_resolver,
            [
                _create("nav.home", "fr", "Maison"),
                _create("nav.contact", "fr", "Nous joindre"),
            ],
        )

    assert flaky_resolver.cache.get(Locale.FR) is None
    tree = await flaky_resolver.resolve("fr")
    assert tree.get("nav.home") == "Maison"
    assert tree.get("nav.contact") == "Contact"


@pytest.mark.asyncio
async def test_update_translation_value(resolver):
    await resolver.resolve("en")

    updated = await service.update_translation(
        resolver,
        Locale.EN,
        "nav.home",
        schemas.TranslationUpdateRequest(value="Start"),
    )

    assert updated.value == "Start"
    assert updated.namespace == "nav"
    assert resolver.cache.get(Locale.EN) is None


@pytest.mark.asyncio
async def test_update_translation_moves_record(resolver, store):
    await resolver.resolve("en")
    await resolver.resolve("de")

    moved = await service.update_translation(
        resolver,
        Locale.EN,
        "nav.home",
        schemas.TranslationUpdateRequest(key="nav.start", locale=Locale.DE),
    )

    assert (moved.locale, moved.key, moved.value) == (
        Locale.DE,
        "nav.start",
        "Home (edited)",
    )
    assert await store.get_record(Locale.EN, "nav.home") is None
    assert resolver.cache.get(Locale.EN) is None
    assert resolver.cache.get(Locale.DE) is None


@pytest.mark.asyncio
async def test_update_translation_new_key_rederives_namespace(resolver):
    moved = await service.update_translation(
        resolver,
        Locale.FR,
        "nav.aboutUs",
        schemas.TranslationUpdateRequest(key="footer.about"),
    )

    assert moved.namespace == "footer"


@pytest.mark.asyncio
async def test_update_translation_conflict(resolver, store):
    with pytest.raises(RecordConflictError):
        await service.update_translation(
            resolver,
            Locale.FR,
            "nav.aboutUs",
            schemas.TranslationUpdateRequest(key="footer.rights"),
        )

    assert await store.get_record(Locale.FR, "nav.aboutUs") is not None


@pytest.mark.asyncio
async def test_update_translation_missing_raises(resolver):
    with pytest.raises(RecordNotFoundError):
        await service.update_translation(
            resolver,
            Locale.ES,
            "nav.home",
            schemas.TranslationUpdateRequest(value="Inicio"),
        )


@pytest.mark.asyncio
async def test_delete_translation_restores_bundle_value(resolver):
    assert (await resolver.resolve("en")).get("nav.home") == "Home (edited)"

    await service.delete_translation(resolver, Locale.EN, "nav.home")

    assert (await resolver.resolve("en")).get("nav.home") == "Home"


@pytest.mark.asyncio
async def test_delete_translation_missing_raises(resolver):
    with pytest.raises(RecordNotFoundError):
        await service.delete_translation(resolver, Locale.EN, "nav.missing")


@pytest.mark.asyncio
async def test_clear_cache_one_locale_and_all(resolver):
    await resolver.resolve("en")
    await resolver.resolve("fr")

    assert service.clear_cache(resolver, Locale.FR) == 1
    assert resolver.cache.get(Locale.EN) is not None
    assert service.clear_cache(resolver) == 1
    assert len(resolver.cache) == 0


@pytest.mark.asyncio
async def test_refresh_with_locale_returns_fresh_tree(resolver, store):
    await resolver.resolve("fr")
    await store.upsert_record(
        make_record(key="nav.home", locale=Locale.FR, value="Maison")
    )

    tree = await service.refresh(resolver, Locale.FR)

    assert tree.get("nav.home") == "Maison"
    assert resolver.cache.get(Locale.FR) is tree


@pytest.mark.asyncio
async def test_refresh_without_locale_clears_everything(resolver):
    await resolver.resolve("en")

    assert await service.refresh(resolver) is None
    assert len(resolver.cache) == 0