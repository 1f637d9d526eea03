import pytest

from hrcli.models import Human, Metric, human_from_dict, parse_metric


def test_metric_from_str_valid():
    m = parse_metric("speed:42")
    assert m.name == "speed"
    assert m.value == 42


def test_metric_from_str_invalid_format():
    with pytest.raises(ValueError, match="Invalid format"):
        parse_metric("speed-42")


def test_metric_from_str_invalid_value():
    with pytest.raises(ValueError, match="valid number"):
        parse_metric("speed:NaN")


@pytest.mark.parametrize("text", ["speed:256", "speed:-1", "speed:", "speed: 3"])
def test_metric_value_out_of_range_or_malformed(text):
    with pytest.raises(ValueError, match="valid number"):
        parse_metric(text)


def test_metric_too_many_colons():
    with pytest.raises(ValueError, match="Invalid format"):
        parse_metric("a:b:1")


def test_metric_bounds():
    assert parse_metric("x:0") == Metric("x", 0)
    assert parse_metric("x:255") == Metric("x", 255)


def test_to_dict_and_back_roundtrip():
    human = Human(
        name="Jane",
        id="123",
        phone="555-0100",
        description="desc",
        label=["eng"],
        metric=[Metric("speed", 7)],
    )
    data = human.to_dict()
    assert data == {
        "id": "123",
        "name": "Jane",
        "phone": "555-0100",
        "description": "desc",
        "label": ["eng"],
        "metric": [{"name": "speed", "value": 7}],
    }
    assert human_from_dict(data) == human


def test_from_dict_missing_optionals():
    human = human_from_dict({"name": "Bob"})
    assert human == Human(name="Bob")


def test_from_dict_requires_name():
    with pytest.raises(ValueError):
        human_from_dict({"id": "1"})


def test_from_dict_rejects_bad_metric_value():
    with pytest.raises(ValueError):
        human_from_dict({"name": "Bob", "metric": [{"name": "speed", "value": 300}]})