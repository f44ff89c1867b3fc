import pytest
from elm_review_action.models.annotation import AnnotationLevel
from elm_review_action.models.report import CliError, ReviewErrors
from elm_review_action.review.mapper import (
    ReportValidationError,
    parse_report,
    report_errors,
    wrap,
)


@pytest.mark.unit
def test_parse_review_errors(make_message):
    report = parse_report({
        "type": "review-errors",
        "errors": [{"path": "src/A.elm", "errors": [make_message()]}],
    })

    assert isinstance(report, ReviewErrors)
    assert report.errors[0].errors[0].rule == "NoUnused.Variables"


@pytest.mark.unit
def test_parse_cli_error():
    report = parse_report({
        "type": "error",
        "title": "Parse error",
        "path": "src/Foo.elm",
        "message": "bad config",
    })

    assert isinstance(report, CliError)
    assert report.path == "src/Foo.elm"
    assert report.message == "bad config"


@pytest.mark.unit
def test_parse_cli_error_joins_message_list():
    report = parse_report({"type": "error", "title": "T", "message": ["first", "second"]})

    assert report.message == "first\nsecond"


@pytest.mark.unit
@pytest.mark.parametrize("data", [
    {"type": "something-else"},
    {"errors": []},
    [1, 2, 3],
    "text",
])
def test_parse_unknown_shape_raises(data):
    with pytest.raises(ReportValidationError):
        parse_report(data)


@pytest.mark.unit
def test_single_line_region_has_columns(make_message):
    report = ReviewErrors(
        type="review-errors",
        errors=[{"path": "src/A.elm", "errors": [make_message(start=(3, 2), end=(3, 10))]}],
    )

    [annotation] = report_errors(report)

    assert annotation.start_line == 3
    assert annotation.end_line == 3
    assert annotation.start_column == 2
    assert annotation.end_column == 10


@pytest.mark.unit
def test_multi_line_region_has_no_columns(make_message):
    report = ReviewErrors(
        type="review-errors",
        errors=[{"path": "src/A.elm", "errors": [make_message(start=(3, 2), end=(5, 10))]}],
    )

    [annotation] = report_errors(report)

    assert annotation.start_line == 3
    assert annotation.end_line == 5
    assert annotation.start_column is None
    assert annotation.end_column is None
    assert "start_column" not in annotation.to_api()
    assert "end_column" not in annotation.to_api()


@pytest.mark.unit
def test_annotation_fields(make_message):
    report = ReviewErrors(
        type="review-errors",
        errors=[{
            "path": "src/A.elm",
            "errors": [make_message(
                rule="NoUnused.Import",
                message="Unused import",
                details=["Remove it.", "It is not used."],
            )],
        }],
    )

    [annotation] = report_errors(report)

    assert annotation.path == "src/A.elm"
    assert annotation.annotation_level == AnnotationLevel.FAILURE
    assert annotation.title == "NoUnused.Import: Unused import"
    assert annotation.message == "Remove it.\n\nIt is not used."
    assert annotation.to_api()["annotation_level"] == "failure"


@pytest.mark.unit
def test_annotations_follow_report_order(make_message):
    report = ReviewErrors(
        type="review-errors",
        errors=[
            {"path": "src/A.elm", "errors": [make_message(rule="A1"), make_message(rule="A2")]},
            {"path": "src/B.elm", "errors": []},
            {"path": "src/C.elm", "errors": [make_message(rule="C1")]},
        ],
    )

    annotations = report_errors(report)

    assert len(annotations) == 3
    assert [a.title.split(":")[0] for a in annotations] == ["A1", "A2", "C1"]
    assert [a.path for a in annotations] == ["src/A.elm", "src/A.elm", "src/C.elm"]


@pytest.mark.unit
def test_empty_report_has_no_annotations():
    assert report_errors(ReviewErrors(type="review-errors", errors=[])) == []


@pytest.mark.unit
def test_wrap_long_line():
    text = " ".join(["word"] * 40)

    wrapped = wrap(80, text)

    lines = wrapped.split("\n")
    assert len(lines) > 1
    assert all(len(line) <= 80 for line in lines)
    assert wrapped.replace("\n", " ") == text


@pytest.mark.unit
def test_wrap_keeps_paragraphs_and_long_words():
    url = "https://package.elm-lang.org/packages/jfmengels/elm-review-unused/latest/NoUnused-Variables"
    text = f"First paragraph.\n\n{url}"

    assert wrap(80, text) == text
