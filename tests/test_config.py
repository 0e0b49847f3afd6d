import pytest

from faq_matcher import DEFAULT_ESCALATION_MESSAGE, MatcherConfig

ENV_KEYS = [
    "FAQ_STRONG_THRESHOLD",
    "FAQ_WEAK_THRESHOLD",
    "FAQ_SCORE_GAP",
    "FAQ_FUZZY_ACCEPT",
    "FAQ_FUZZY_MAX_DISTANCE",
    "FAQ_FUZZY_MIN_TOKEN_LENGTH",
    "FAQ_AMBIGUITY_EPSILON",
    "FAQ_FAIL_LIMIT",
    "FAQ_TOP_K",
    "FAQ_SYNONYM_TIMEOUT",
    "FAQ_SYNONYM_CONCURRENCY",
    "FAQ_EXTRA_SCRIPTS",
    "FAQ_ESCALATION_MESSAGE",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults_without_environment():
    assert MatcherConfig.from_env() == MatcherConfig()


def test_defaults():
    config = MatcherConfig()
    assert config.strong_threshold == 0.3
    assert config.weak_threshold == 0.2
    assert config.score_gap == 0.08
    assert config.fuzzy_accept == 0.3
    assert config.fuzzy_max_distance == 0.45
    assert config.ambiguity_epsilon == 0.05
    assert config.fail_limit == 3
    assert config.top_k == 3
    assert config.escalation_message == DEFAULT_ESCALATION_MESSAGE


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("FAQ_STRONG_THRESHOLD", "0.5")
    monkeypatch.setenv("FAQ_WEAK_THRESHOLD", " 0.25 ")
    monkeypatch.setenv("FAQ_FAIL_LIMIT", "5")
    monkeypatch.setenv("FAQ_TOP_K", "4")
    monkeypatch.setenv("FAQ_EXTRA_SCRIPTS", "")
    monkeypatch.setenv("FAQ_ESCALATION_MESSAGE", "Please call us.")

    config = MatcherConfig.from_env()

    assert config.strong_threshold == 0.5
    assert config.weak_threshold == 0.25
    assert config.fail_limit == 5
    assert config.top_k == 4
    assert config.extra_scripts == ""
    assert config.escalation_message == "Please call us."


@pytest.mark.parametrize(
    "key, value, attr",
    [
        ("FAQ_TOP_K", "abc", "top_k"),
        ("FAQ_FAIL_LIMIT", "0", "fail_limit"),
        ("FAQ_FUZZY_ACCEPT", "-1", "fuzzy_accept"),
        ("FAQ_SCORE_GAP", "nan", "score_gap"),
        ("FAQ_SYNONYM_TIMEOUT", "", "synonym_timeout"),
    ],
)
def test_invalid_values_fall_back_to_defaults(monkeypatch, key, value, attr):
    monkeypatch.setenv(key, value)
    assert getattr(MatcherConfig.from_env(), attr) == getattr(MatcherConfig(), attr)


def test_blank_escalation_message_keeps_default(monkeypatch):
    monkeypatch.setenv("FAQ_ESCALATION_MESSAGE", "   ")
    assert MatcherConfig.from_env().escalation_message == DEFAULT_ESCALATION_MESSAGE
