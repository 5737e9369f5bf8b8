import itertools
import threading

import pytest

from apps.name_service import words
from apps.name_service.composer import (
    TEMPLATES,
    Fillers,
    NameComposer,
    RandomSource,
    WordLists,
    compose,
    render,
)

F = Fillers(base="Brian", prefix="Iron", type="Golem", suffix="of Chaos", nickname="the Lost")

EXPECTED = {
    1: "Iron Golem",
    2: "Iron Brian",
    3: "Brian the Lost, Iron Golem",
    4: "Brian, Golem of Chaos",
    5: "Brian of Chaos",
    6: "Brian the Lost of Chaos",
    7: "Iron Golem Brian",
    8: "Iron Brian the Lost",
    9: "Iron Brian, Golem of Chaos",
    10: "Brian, the Lost Golem",
    11: "Golem Brian",
}


def test_template_table_has_eleven_ordered_ids():
    assert [tid for tid, _ in TEMPLATES] == list(range(1, 12))


@pytest.mark.parametrize("template_id", sorted(EXPECTED))
def test_each_template_renders_its_arrangement(template_id):
    renderer = dict(TEMPLATES)[template_id]
    assert renderer(F) == EXPECTED[template_id]
    assert render(template_id, F) == EXPECTED[template_id]


@pytest.mark.parametrize("template_id", range(2, 12))
def test_templates_two_to_eleven_contain_base(template_id):
    f = F._replace(base="Zzyzx")
    assert "Zzyzx" in render(template_id, f)


def test_template_one_ignores_base():
    assert render(1, F._replace(base="Zzyzx")) == "Iron Golem"


@pytest.mark.parametrize("template_id", [0, 12, -3])
def test_unknown_template_falls_back_to_base(template_id):
    assert render(template_id, F) == "Brian"


def test_fallback_with_empty_base_is_empty(scripted):
    composer = NameComposer(source=scripted(99))
    assert composer.compose("") == ""


def test_empty_base_still_renders_fillers(scripted):
    composer = NameComposer(source=scripted(4))
    assert composer.compose("") == f", {words.TYPES[0]} {words.SUFFIXES[0]}"


@pytest.mark.parametrize("template_id", [1, 6, 11, 42])
def test_randomness_consumption_is_template_independent(scripted, template_id):
    source = scripted(template_id)
    NameComposer(source=source).compose("Brian")
    assert source.calls == [
        ("randint", 1, 11),
        ("choice", len(words.PREFIXES)),
        ("choice", len(words.TYPES)),
        ("choice", len(words.SUFFIXES)),
        ("choice", len(words.NICKNAMES)),
    ]


def test_many_draws_cover_every_template_and_word(seeded_composer):
    ids = set()
    seen = {"prefix": set(), "type": set(), "suffix": set(), "nickname": set()}
    for _ in range(3000):
        template_id, fillers = seeded_composer.draw("Brian")
        ids.add(template_id)
        for key in seen:
            seen[key].add(getattr(fillers, key))
    assert ids == set(range(1, 12))
    assert seen["prefix"] == set(words.PREFIXES)
    assert seen["type"] == set(words.TYPES)
    assert seen["suffix"] == set(words.SUFFIXES)
    assert seen["nickname"] == set(words.NICKNAMES)


def test_composed_names_are_non_empty_and_usually_contain_base(seeded_composer):
    for _ in range(200):
        name = seeded_composer.compose("Link")
        assert isinstance(name, str) and name
    assert any("Link" in seeded_composer.compose("Link") for _ in range(50))


def test_same_seed_gives_same_sequence():
    a = NameComposer(source=RandomSource(seed=7))
    b = NameComposer(source=RandomSource(seed=7))
    assert [a.compose("Solaire") for _ in range(50)] == [b.compose("Solaire") for _ in range(50)]


def test_word_list_overrides_replace_only_named_lists(scripted):
    lists = WordLists.with_overrides({"prefixes": ["Sunbro"]})
    assert lists.prefixes == ("Sunbro",)
    assert lists.types == words.TYPES
    assert NameComposer(words=lists, source=scripted(2)).compose("Solaire") == "Sunbro Solaire"


def test_module_level_compose_returns_string():
    assert isinstance(compose("Brian"), str)


def test_shared_composer_is_safe_across_threads():
    lists = WordLists(
        prefixes=("Iron", "Black"),
        types=("Golem", "Knight"),
        suffixes=("of Chaos", "of Astora"),
        nicknames=("the Lost", "the Great"),
    )
    composer = NameComposer(words=lists, source=RandomSource(seed=1))
    valid = {
        render(tid, Fillers("B", p, t, s, n))
        for tid, _ in TEMPLATES
        for p, t, s, n in itertools.product(lists.prefixes, lists.types, lists.suffixes, lists.nicknames)
    }
    workers, per_worker = 8, 2000
    results = [[] for _ in range(workers)]

    def run(out):
        for _ in range(per_worker):
            out.append(composer.compose("B"))

    threads = [threading.Thread(target=run, args=(out,)) for out in results]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    names = [name for out in results for name in out]
    assert len(names) == workers * per_worker
    assert set(names) <= valid
