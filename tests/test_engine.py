from showmatch.config import Settings
from showmatch.matching import MatchingEngine
from showmatch.matching.scorer import score_match
from showmatch.models import InterestLevel


def test_top_matches_sorted_and_limited(settings, client, make_property):
    properties = [
        make_property(property_id=i, price=300000 + i * 50000) for i in range(10)
    ]
    engine = MatchingEngine(settings)

    matches = engine.top_matches_for_client(client, properties, [])

    assert len(matches) == 5
    scores = [m.match.score for m in matches]
    assert scores == sorted(scores, reverse=True)
    assert matches[0].property.price == 500000


def test_top_matches_respects_explicit_limit(settings, client, make_property):
    properties = [make_property(property_id=i) for i in range(12)]
    engine = MatchingEngine(settings)
    assert len(engine.top_matches_for_client(client, properties, [], limit=10)) == 10
    assert engine.top_matches_for_client(client, properties, [], limit=0) == []


def test_top_matches_ties_keep_input_order(settings, client, make_property):
    properties = [make_property(property_id=i, price=500000) for i in (7, 3, 9, 1)]
    engine = MatchingEngine(settings)

    matches = engine.top_matches_for_client(client, properties, [], limit=4)

    assert [m.property.id for m in matches] == [7, 3, 9, 1]


def test_top_matches_have_no_floor_by_default(settings, client, make_property):
    properties = [make_property(property_id=1, price=5_000_000)]
    matches = MatchingEngine(settings).top_matches_for_client(client, properties, [])
    assert len(matches) == 1
    assert matches[0].match.score < 50


def test_top_matches_min_score_filter(settings, client, make_property):
    properties = [
        make_property(property_id=1, price=5_000_000),
        make_property(property_id=2, price=500000),
    ]
    matches = MatchingEngine(settings).top_matches_for_client(
        client, properties, [], min_score=50
    )
    assert [m.property.id for m in matches] == [2]


def test_top_matches_only_use_the_clients_feedback(
    settings, make_client, make_property, make_feedback
):
    sarah = make_client(client_id=1)
    prop = make_property(features=["Pool"])
    own = make_feedback(client_id=1, likes=["Pool"])
    other = make_feedback(client_id=2, likes=["Garage"])

    matches = MatchingEngine(settings).top_matches_for_client(sarah, [prop], [own, other])

    assert matches[0].match == score_match(sarah, prop, [own], {"1": prop})


def test_interested_clients_floor(settings, make_client, make_property):
    prop = make_property(price=500000)
    clients = [
        make_client(client_id=1, budget_min=400000, budget_max=600000),
        make_client(client_id=2, budget_min=100000, budget_max=200000),
        make_client(client_id=3, budget_min=450000, budget_max=550000),
    ]

    matches = MatchingEngine(settings).interested_clients_for_property(prop, clients, [])

    assert [m.client.id for m in matches] == [1, 3]
    assert all(m.match.score >= 50 for m in matches)


def test_interested_clients_floor_comes_from_settings(make_client, make_property):
    prop = make_property(price=500000)
    clients = [make_client(client_id=1)]
    engine = MatchingEngine(Settings(interested_min_score=90))
    assert engine.interested_clients_for_property(prop, clients, []) == []


def test_interested_clients_use_each_clients_feedback(
    settings, make_client, make_property, make_feedback
):
    prop = make_property(price=500000, features=["Pool"])
    clients = [make_client(client_id=1), make_client(client_id=2)]
    feedback = [
        make_feedback(client_id=2, likes=["Pool"]),
        make_feedback(client_id=2, likes=["pool"], interest=InterestLevel.HIGH),
    ]

    matches = MatchingEngine(settings).interested_clients_for_property(prop, clients, feedback)

    assert [m.client.id for m in matches] == [2, 1]
    assert matches[0].match.breakdown["features"] == 12
    assert matches[1].match.breakdown["features"] == 10


def test_sample_dataset_top_matches(settings, sample_dataset):
    sarah = sample_dataset.get_client(1)
    matches = MatchingEngine(settings).top_matches_for_client(
        sarah, sample_dataset.properties, sample_dataset.feedback
    )

    assert [m.property.id for m in matches] == [5, 1, 2, 4, 3]
    assert [m.match.score for m in matches] == [89, 83, 61, 43, 37]

    best = matches[0].match
    assert best.recommendation == "Excellent Match"
    assert "Preferred property type: Townhouse" in best.reasons
    assert "Similar to properties client liked" in best.reasons
    assert "Has preferred features: attached garage" in best.reasons

    worst = matches[-1].match
    assert "Not preferred: Condo" in worst.mismatches
    assert "Only 2 bedrooms, may feel small" in worst.mismatches


def test_sample_dataset_interested_clients(settings, sample_dataset):
    townhouse = sample_dataset.get_property(5)
    matches = MatchingEngine(settings).interested_clients_for_property(
        townhouse,
        sample_dataset.clients,
        sample_dataset.feedback,
        catalog=sample_dataset.properties,
    )

    assert [m.client.name for m in matches] == [
        "Sarah Johnson",
        "Mike Chen",
        "Jessica Williams",
    ]
    assert [m.match.score for m in matches] == [89, 66, 65]
