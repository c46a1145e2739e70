from task_insights.text_classifier import (
    analyze_description,
    analyze_sentiment,
    assess_complexity,
    categorize,
    estimate_priority,
    extract_keywords,
    improvement_suggestions,
)
from task_insights.vocabulary import category_names


def test_analyze_login_bug_scenario():
    analysis = analyze_description("Fix urgent critical bug in login API")
    assert analysis.priority == "high"
    assert analysis.category == "development"
    assert analysis.complexity == "high"
    assert analysis.sentiment == "negative"
    assert analysis.keywords == ["fix", "urgent", "critical", "bug", "login"]
    assert analysis.estimated_time == "35 minutes"
    assert analysis.suggestions == ["Consider adding a deadline or target completion date"]


def test_high_priority_beats_low_priority_words():
    assert estimate_priority("Maybe someday, but it is URGENT") == "high"
    assert estimate_priority("maybe clean the garage someday") == "low"
    assert estimate_priority("nice to have: dark mode") == "low"
    assert estimate_priority("write the weekly report") == "medium"


def test_category_uses_declared_order():
    # "api" (development) and "design" both match; development is declared first
    assert categorize("Design the public API") == "development"
    # "mockup" (design) precedes "review" (meeting)
    assert categorize("Review the mockup") == "design"
    assert categorize("Prepare standup notes") == "meeting"
    assert categorize("Write readme") == "documentation"
    assert categorize("Run the QA pass") == "testing"
    assert categorize("Publish package") == "deployment"
    assert categorize("Buy groceries") == "general"


def test_category_is_always_in_closed_vocabulary():
    names = set(category_names())
    for text in ["", "random words", "Deploy the bug fix", "ux call"]:
        assert categorize(text) in names


def test_sentiment_counts_whole_words():
    assert analyze_sentiment("quick and easy change") == "positive"
    assert analyze_sentiment("a hard and difficult migration") == "negative"
    assert analyze_sentiment("easy but hard") == "neutral"
    # punctuation is not stripped, so "easy," is not a sentiment word
    assert analyze_sentiment("easy, really") == "neutral"


def test_complexity_checks_low_indicators_first():
    assert assess_complexity("simple but complex") == "low"
    assert assess_complexity("standard rollout") == "medium"
    assert assess_complexity("advanced tuning") == "high"


def test_complexity_falls_back_to_length():
    assert assess_complexity("x" * 49) == "low"
    assert assess_complexity("x" * 50) == "medium"
    assert assess_complexity("x" * 149) == "medium"
    assert assess_complexity("x" * 150) == "high"


def test_extract_keywords_drops_short_and_stop_words():
    text = "Hello, world! The API's docs are for the team and with tests"
    assert extract_keywords(text) == ["hello", "world", "apis", "docs", "team"]


def test_improvement_suggestions_can_co_occur():
    long_text = "x" * 201
    suggestions = improvement_suggestions(long_text)
    assert suggestions == [
        "Consider adding a deadline or target completion date",
        "Consider breaking this into smaller, more manageable sub-tasks",
        "Consider starting with an action verb (create, build, fix, etc.) for clarity",
    ]


def test_deadline_check_is_case_sensitive():
    assert improvement_suggestions("Update pricing page, DEADLINE friday") == [
        "Consider adding a deadline or target completion date"
    ]
    assert improvement_suggestions("Update pricing page, deadline friday") == []


def test_extract_keywords_strips_non_ascii_characters():
    assert extract_keywords("café déjà vu") == ["caf"]


def test_empty_description_is_total():
    analysis = analyze_description("")
    assert analysis.sentiment == "neutral"
    assert analysis.priority == "medium"
    assert analysis.category == "general"
    assert analysis.complexity == "low"
    assert analysis.keywords == []
    assert analysis.estimated_time == "30 minutes"
    assert len(analysis.suggestions) == 3


def test_analysis_to_dict_uses_wire_names():
    payload = analyze_description("Create onboarding guide").to_dict()
    assert set(payload) == {
        "sentiment",
        "priority",
        "category",
        "estimatedTime",
        "complexity",
        "keywords",
        "suggestions",
    }
