"""Adds per-option video link fields to the product edit form.

Both hooks are post-processors: they take the upstream form schema or form
data and return the augmented version. Neither raises; a form the extender
cannot make sense of is passed through so the rest of the page still renders.
"""
import copy
import logging
from collections.abc import Mapping, MutableMapping

from videolink.errors import MissingSchemaPath
from videolink.models.product import Product
from videolink.services.form_schema import build_base_data, build_base_schema
from videolink.services.option_source import get_attribute_options
from videolink.services.serializer import VideoLinkSerializer
from videolink.services.video_link_store import prune_blank_links

logger = logging.getLogger(__name__)

FIELD = "video_link"
ELIGIBILITY_FLAG = "usedForConfigurableAttributes"
FALSE_STRINGS = {"", "0", "false", "no", "off"}


def _get(node, *path):
    for key in path:
        if not isinstance(node, Mapping) or key not in node:
            return None
        node = node[key]
    return node


def _option_pair(option):
    if isinstance(option, Mapping):
        return option.get("value"), option.get("label")
    option_id, label = option
    return option_id, label


def _is_set(flag):
    """Hosts send the marker as a bool, a number or text such as "0"."""
    if isinstance(flag, str):
        return flag.strip().lower() not in FALSE_STRINGS
    return bool(flag)


def product_fields(record):
    """Product fields of a form record: under ``product`` or the record itself."""
    if not isinstance(record, MutableMapping):
        return None
    product = record.get("product")
    if isinstance(product, MutableMapping):
        return product
    return record


class VideoLinkFormExtender:
    def __init__(
        self,
        store,
        serializer=None,
        attribute_code="color",
        sort_order=100,
        form_attributes=None,
    ):
        self.store = store
        self.serializer = serializer or VideoLinkSerializer()
        self.attribute_code = attribute_code
        self.sort_order = sort_order
        self.form_attributes = form_attributes or ["name", "sku", attribute_code]

    # ----- Schema -----

    def extend_schema(self, base_schema, attribute_code, options):
        """Add one text field per option after the placeholder entry.

        Returns ``base_schema`` itself when the attribute is not the target,
        or is not marked for configurable options; otherwise a new schema.
        """
        if attribute_code != self.attribute_code:
            return base_schema

        try:
            group_code = self._find_group(base_schema, attribute_code)
        except MissingSchemaPath as e:
            logger.debug("Video link fields not added: %s", e)
            return base_schema

        try:
            options = list(options or [])
        except TypeError:
            logger.debug("Video link fields not added: options %r not iterable", options)
            return base_schema

        schema = copy.deepcopy(base_schema)
        container = schema[group_code]["children"][f"container_{attribute_code}"]
        children = container.setdefault("children", {})

        # First option is the empty "no selection" entry
        for option in options[1:]:
            try:
                option_id, label = _option_pair(option)
            except (TypeError, ValueError):
                logger.debug("Skipping malformed option %r", option)
                continue
            if option_id is None or option_id == "":
                logger.debug("Skipping option without an id %r", option)
                continue
            children[f"{attribute_code}_{option_id}_video_link"] = self._field(
                option_id, label
            )

        return schema

    def _find_group(self, schema, attribute_code):
        container_key = f"container_{attribute_code}"
        if isinstance(schema, Mapping):
            for group_code, group in schema.items():
                container = _get(group, "children", container_key)
                if container is None:
                    continue
                config = _get(
                    container, "children", attribute_code, "arguments", "data", "config"
                )
                if _is_set(_get(config, ELIGIBILITY_FLAG)):
                    return group_code
        raise MissingSchemaPath(
            f"no configurable {container_key} node in the form schema"
        )

    def _field(self, option_id, label):
        return {
            "arguments": {
                "data": {
                    "config": {
                        "label": f"Video Link for {label}",
                        "componentType": "field",
                        "formElement": "input",
                        "dataType": "text",
                        "dataScope": f"{FIELD}.{option_id}",
                        "sortOrder": self.sort_order,
                    }
                }
            }
        }

    # ----- Data -----

    def extend_data(self, base_data):
        """Decode each record's stored links in place so the form can address
        ``video_link.<option id>`` directly."""
        if not isinstance(base_data, MutableMapping):
            return base_data

        for record in base_data.values():
            fields = product_fields(record)
            if fields is None or FIELD not in fields:
                continue
            if isinstance(fields[FIELD], Mapping):
                continue
            fields[FIELD] = self.serializer.decode(fields[FIELD])

        return base_data

    # ----- Whole form -----

    def load_form(self, product):
        meta = build_base_schema(product, self.form_attributes, self.attribute_code)
        meta = self.extend_schema(
            meta, self.attribute_code, get_attribute_options(self.attribute_code)
        )
        data = self.extend_data(build_base_data(product))
        return {"meta": meta, "data": data}

    def save_form(self, product_id, form_data, admin=None):
        """Persist the video link section of a submitted form.

        A form without the section, or whose section is not a mapping,
        leaves the stored links untouched.
        Returns the product, or None if it does not exist.
        """
        fields = product_fields(form_data) or {}
        if FIELD not in fields or fields[FIELD] is None:
            return self.store.session.get(Product, product_id)
        if not isinstance(fields[FIELD], Mapping):
            logger.warning(
                "Video links not saved for product %s: expected a mapping, got %s",
                product_id,
                type(fields[FIELD]).__name__,
            )
            return self.store.session.get(Product, product_id)

        return self.store.set(
            product_id, prune_blank_links(fields[FIELD]), admin=admin
        )
