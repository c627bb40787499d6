from app.sample_data import SAMPLE_OPINIONS, SAMPLE_SCORES, load_sample_opinions, load_sample_scores
from examertric.metrics import compute_insights
from examertric.storage import append_opinion, append_scores, load_opinions, load_scores


def test_sample_data_persists_and_aggregates(store, now):
    append_scores(store, load_sample_scores(now))
    for opinion in load_sample_opinions(now):
        append_opinion(store, opinion)

    scores = load_scores(store)
    opinions = load_opinions(store)
    assert len(scores) == len(SAMPLE_SCORES)
    assert len(opinions) == len(SAMPLE_OPINIONS)
    assert len({s.id for s in scores}) == len(scores)

    stats = compute_insights(scores, opinions)
    assert stats.oral_avg == 77.67
    assert stats.written_avg == 81.67
    assert stats.summary == "Students tend to perform better in written assessments but prefer written assessments."
