import pytest

from workflows.services.spec.errors import PipelineStage, ValidationError
from workflows.services.spec.parser import parse_json, parse_llm_json


def test_parse_json_object():
    assert parse_json('{"a": [1, 2.5, true, null]}') == {"a": [1, 2.5, True, None]}


def test_parse_json_rejects_non_string():
    with pytest.raises(ValidationError) as exc:
        parse_json(None)
    assert exc.value.stage is PipelineStage.PARSE


def test_invalid_json_reports_position_and_context():
    text = '{"name": "A", "tasks": [1 2]}'
    with pytest.raises(ValidationError) as exc:
        parse_json(text)
    err = exc.value
    assert err.stage is PipelineStage.PARSE
    assert err.position == text.index("2]")
    assert "2]" in err.context
    assert "Invalid JSON" in str(err)
    assert "Context:" in str(err)


def test_context_snippet_is_bounded():
    text = '{"a": "' + "x" * 200 + '" oops}'
    with pytest.raises(ValidationError) as exc:
        parse_json(text)
    assert len(exc.value.context) <= 60


def test_parse_llm_json_repairs_first():
    assert parse_llm_json("```json\n{name: 'A',}\n```") == {"name": "A"}


def test_parse_llm_json_blank():
    with pytest.raises(ValidationError) as exc:
        parse_llm_json("")
    assert exc.value.stage is PipelineStage.SANITIZE
