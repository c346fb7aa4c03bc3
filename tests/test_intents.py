"""Tests for llm_json.intents."""

import logging

import pytest
from pydantic import ValidationError

from llm_json import IntentAnalysis, IntentRequest, parse_intents


class TestParseIntents:
    def test_intents_array(self):
        raw = (
            '{"intents": [{"intent": "CreateTeam", "parameters": {"name": "Ops"}}, '
            '{"intent": "GetObjectives", "parameters": {}}]}'
        )
        analysis = parse_intents(raw)
        assert analysis.intent_names == ["CreateTeam", "GetObjectives"]
        assert analysis.intents[0].parameters == {"name": "Ops"}
        assert analysis.degraded is False
        assert analysis.repairs == []

    def test_repaired_response(self):
        raw = 'Sure! {intents: [{intent: CreateTeam, parameters: {name: "Ops",},},]}'
        analysis = parse_intents(raw)
        assert analysis.intent_names == ["CreateTeam"]
        assert analysis.degraded is False
        assert "discarded_prefix" in analysis.repairs
        assert "quoted_value" in analysis.repairs

    def test_single_intent_object(self):
        analysis = parse_intents('{"intent": "General", "parameters": {}},}')
        assert analysis.intent_names == ["General"]
        assert analysis.degraded is False

    def test_bare_list(self):
        analysis = parse_intents('[{"intent": "A"}, {"intent": "B"}]')
        assert analysis.intent_names == ["A", "B"]

    def test_case_insensitive_keys(self):
        analysis = parse_intents('{"Intents": [{"Intent": "CreateKeyResult", "Parameters": {"target": 5}}]}')
        assert analysis.intent_names == ["CreateKeyResult"]
        assert analysis.intents[0].parameters == {"target": 5}

    def test_malformed_entries_skipped(self):
        raw = '{"intents": [{"intent": ""}, "oops", {"parameters": {}}, {"intent": "Help", "parameters": 3}]}'
        analysis = parse_intents(raw)
        assert analysis.intent_names == ["Help"]
        assert analysis.intents[0].parameters == {}

    def test_intent_name_trimmed(self):
        assert parse_intents('{"intent": "  Help  "}').intent_names == ["Help"]


class TestDefaultIntent:
    def test_garbage_defaults_to_general(self):
        analysis = parse_intents("I am not sure what you mean.")
        assert analysis.intent_names == ["General"]
        assert analysis.degraded is True

    def test_empty_intents_defaults_to_general(self):
        analysis = parse_intents('{"intents": []}')
        assert analysis.intent_names == ["General"]
        assert analysis.degraded is True

    def test_none_input(self):
        assert parse_intents(None).intent_names == ["General"]

    def test_unrelated_object(self):
        analysis = parse_intents('{"answer": 42}')
        assert analysis.intent_names == ["General"]
        assert analysis.degraded is True

    def test_deeply_nested_array_defaults_to_general(self):
        analysis = parse_intents("[" * 100_000 + "]" * 100_000)
        assert analysis.intent_names == ["General"]
        assert analysis.degraded is True

    def test_logs_parsed_intent_names(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="llm_json.intents"):
            parse_intents('{"intents": [{"intent": "CreateTeam"}, {"intent": "Help"}]}')
        assert any("CreateTeam, Help" in r.getMessage() for r in caplog.records)


class TestModels:
    def test_intent_requires_name(self):
        with pytest.raises(ValidationError):
            IntentRequest(intent="")

    def test_parameters_default(self):
        assert IntentRequest(intent="General").parameters == {}

    def test_analysis_defaults(self):
        analysis = IntentAnalysis()
        assert analysis.intents == []
        assert analysis.degraded is False
        assert analysis.intent_names == []
