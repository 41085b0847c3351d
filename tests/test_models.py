import json

from coding_coach.models import AnalysisResult

def test_wire_round_trip_preserves_every_field():
    wire = {
        "score": 64,
        "summary": "Works, but hard to follow.",
        "improvements": [
            {
                "category": "Magic numbers",
                "issue": "86400 is unexplained",
                "suggestion": "Name it SECONDS_PER_DAY",
                "severity": "low",
                "lineNumber": 3,
                "codeSnippet": "ttl = 86400",
            },
            {
                "category": "Error handling",
                "issue": "Exceptions are swallowed",
                "suggestion": "Log and re-raise",
                "severity": "high",
            },
            {
                "category": "Naming",
                "issue": "Variable x is unclear",
                "suggestion": "Rename x to retry_count",
                "severity": "medium",
                "lineNumber": None,
                "codeSnippet": None,
            },
        ],
    }

    result = AnalysisResult.model_validate_json(json.dumps(wire))
    again = AnalysisResult.model_validate(result.to_wire())

    assert result.to_wire() == wire
    assert again == result
    assert again.to_wire() == wire

def test_absent_and_null_optional_fields_stay_distinct():
    item = {"category": "c", "issue": "i", "suggestion": "s", "severity": "low"}
    absent = AnalysisResult.model_validate({"score": 1, "summary": "", "improvements": [item]})
    null = AnalysisResult.model_validate(
        {"score": 1, "summary": "", "improvements": [dict(item, lineNumber=None)]}
    )

    assert "lineNumber" not in absent.to_wire()["improvements"][0]
    assert null.to_wire()["improvements"][0]["lineNumber"] is None

def test_populate_by_field_name():
    result = AnalysisResult(
        score=90,
        summary="Clean",
        improvements=[{
            "category": "Nesting",
            "issue": "Deep if chain",
            "suggestion": "Use guard clauses",
            "severity": "medium",
            "line_number": 7,
        }],
    )

    assert result.to_wire()["improvements"][0]["lineNumber"] == 7
