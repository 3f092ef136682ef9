"""Tests for the product form video link extension."""
import copy
import json

import pytest

from videolink.models.option import Option
from videolink.services.form_extender import VideoLinkFormExtender


def _schema(eligible=True):
    color_config = {"label": "Color", "dataScope": "color"}
    if eligible:
        color_config["usedForConfigurableAttributes"] = True
    return {
        "product-details": {
            "arguments": {"data": {"config": {"componentType": "fieldset"}}},
            "children": {
                "container_color": {
                    "arguments": {"data": {"config": {"componentType": "container"}}},
                    "children": {
                        "color": {"arguments": {"data": {"config": color_config}}},
                    },
                },
            },
        }
    }


OPTIONS = [(0, "-- none --"), (1, "Red"), (2, "Blue")]


@pytest.fixture
def extender():
    return VideoLinkFormExtender(store=None, attribute_code="color", sort_order=100)


def _video_fields(schema):
    children = schema["product-details"]["children"]["container_color"]["children"]
    return {k: v for k, v in children.items() if k.endswith("_video_link")}


def test_skips_placeholder_option(extender):
    fields = _video_fields(extender.extend_schema(_schema(), "color", OPTIONS))
    assert sorted(fields) == ["color_1_video_link", "color_2_video_link"]
    assert "color_0_video_link" not in fields


def test_field_descriptor(extender):
    options = [Option("", " "), Option(5, "Green")]
    schema = extender.extend_schema(_schema(), "color", options)
    config = _video_fields(schema)["color_5_video_link"]["arguments"]["data"]["config"]
    assert config == {
        "label": "Video Link for Green",
        "componentType": "field",
        "formElement": "input",
        "dataType": "text",
        "dataScope": "video_link.5",
        "sortOrder": 100,
    }


def test_fields_follow_option_order(extender):
    schema = extender.extend_schema(_schema(), "color", OPTIONS)
    children = schema["product-details"]["children"]["container_color"]["children"]
    assert list(children) == ["color", "color_1_video_link", "color_2_video_link"]


def test_accepts_value_label_mappings(extender):
    options = [{"value": "", "label": " "}, {"value": "9", "label": "Black"}]
    fields = _video_fields(extender.extend_schema(_schema(), "color", options))
    assert list(fields) == ["color_9_video_link"]


def test_malformed_option_is_skipped(extender):
    options = [(0, "none"), None, (3, "White")]
    fields = _video_fields(extender.extend_schema(_schema(), "color", options))
    assert list(fields) == ["color_3_video_link"]


def test_base_schema_is_not_mutated(extender):
    base = _schema()
    snapshot = copy.deepcopy(base)
    extender.extend_schema(base, "color", OPTIONS)
    assert base == snapshot


def test_ineligible_attribute_is_a_no_op(extender):
    base = _schema(eligible=False)
    before = json.dumps(base, sort_keys=True)
    result = extender.extend_schema(base, "color", OPTIONS)
    assert result is base
    assert json.dumps(result, sort_keys=True) == before


def test_other_attribute_is_a_no_op(extender):
    base = _schema()
    assert extender.extend_schema(base, "size", OPTIONS) is base


@pytest.mark.parametrize(
    "base",
    [
        {},
        {"product-details": {"children": {}}},
        {"product-details": {"children": {"container_color": {}}}},
        {"product-details": "not a node"},
        None,
    ],
)
def test_missing_schema_path_returns_input(extender, base):
    assert extender.extend_schema(base, "color", OPTIONS) is base


def test_only_placeholder_adds_nothing(extender):
    schema = extender.extend_schema(_schema(), "color", [(0, " ")])
    assert _video_fields(schema) == {}


def test_extend_data_decodes_in_place(extender):
    data = {
        42: {"product": {"sku": "TEE", "video_link": '{"1":"https://a"}'}},
        43: {"product": {"sku": "CAP"}},
    }
    result = extender.extend_data(data)
    assert result is data
    assert data[42]["product"]["video_link"] == {1: "https://a"}
    assert data[43]["product"] == {"sku": "CAP"}


def test_extend_data_flat_records(extender):
    data = {"7": {"video_link": '{"2":"https://b"}'}}
    extender.extend_data(data)
    assert data["7"]["video_link"] == {2: "https://b"}


def test_extend_data_leaves_decoded_mapping(extender):
    links = {1: "https://a"}
    data = {1: {"product": {"video_link": links}}}
    extender.extend_data(data)
    assert data[1]["product"]["video_link"] is links


@pytest.mark.parametrize("stored", [None, "", "garbage", 17])
def test_extend_data_bad_values_become_empty(extender, stored):
    data = {1: {"product": {"video_link": stored}}}
    extender.extend_data(data)
    assert data[1]["product"]["video_link"] == {}


def test_extend_data_ignores_non_mappings(extender):
    assert extender.extend_data(None) is None
    data = {"config": "value"}
    assert extender.extend_data(data) == {"config": "value"}


@pytest.mark.parametrize("options", [5, object()])
def test_non_iterable_options_return_input(extender, options):
    base = _schema()
    assert extender.extend_schema(base, "color", options) is base


def test_option_without_id_is_skipped(extender):
    options = [(0, "none"), {"label": "Nameless"}, ("", "Blank"), (4, "Grey")]
    fields = _video_fields(extender.extend_schema(_schema(), "color", options))
    assert list(fields) == ["color_4_video_link"]


@pytest.mark.parametrize("flag", ["0", "false", "False", "", "off", 0, False])
def test_false_like_marker_is_a_no_op(extender, flag):
    base = _schema()
    color = base["product-details"]["children"]["container_color"]["children"]["color"]
    color["arguments"]["data"]["config"]["usedForConfigurableAttributes"] = flag
    assert extender.extend_schema(base, "color", OPTIONS) is base


@pytest.mark.parametrize("flag", ["1", "true", 1])
def test_true_like_marker_extends(extender, flag):
    base = _schema()
    color = base["product-details"]["children"]["container_color"]["children"]["color"]
    color["arguments"]["data"]["config"]["usedForConfigurableAttributes"] = flag
    fields = _video_fields(extender.extend_schema(base, "color", OPTIONS))
    assert sorted(fields) == ["color_1_video_link", "color_2_video_link"]


class _RecordingStore:
    def __init__(self):
        self.saved = []
        self.session = self

    def get(self, model, product_id):
        return None

    def set(self, product_id, mapping, admin=None):
        self.saved.append((product_id, mapping))


@pytest.mark.parametrize("links", ["garbage", 17, ["https://a"]])
def test_save_form_ignores_non_mapping_links(links):
    store = _RecordingStore()
    extender = VideoLinkFormExtender(store=store)
    extender.save_form(1, {"product": {"video_link": links}})
    assert store.saved == []


def test_save_form_prunes_blank_links():
    store = _RecordingStore()
    extender = VideoLinkFormExtender(store=store)
    extender.save_form(1, {"product": {"video_link": {"1": "https://a", "2": " "}}})
    assert store.saved == [(1, {1: "https://a"})]
