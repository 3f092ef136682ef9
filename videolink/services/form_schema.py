"""Base product edit form, before any extension adds fields to it.

The schema is a nested dict of nodes. Every node keeps its settings under
``arguments.data.config`` and its child nodes under ``children``::

    {"product-details": {"children": {"container_color": {
        "arguments": {...}, "children": {"color": {...}}}}}}
"""

GROUP_CODE = "product-details"

_FIELD_TYPES = {
    "name": ("text", "input"),
    "sku": ("text", "input"),
}


def _node(config, children=None):
    node = {"arguments": {"data": {"config": config}}}
    if children is not None:
        node["children"] = children
    return node


def build_base_schema(product, attribute_codes, configurable_attribute=None):
    """Product-details group with one container per attribute.

    The configurable attribute is marked ``usedForConfigurableAttributes``
    when the product is configurable.
    """
    children = {}
    for i, code in enumerate(attribute_codes):
        data_type, form_element = _FIELD_TYPES.get(code, ("select", "select"))
        config = {
            "label": code.replace("_", " ").title(),
            "componentType": "field",
            "formElement": form_element,
            "dataType": data_type,
            "dataScope": code,
            "sortOrder": (i + 1) * 10,
        }
        if code == configurable_attribute and product.is_configurable:
            config["usedForConfigurableAttributes"] = True

        children[f"container_{code}"] = _node(
            {
                "componentType": "container",
                "formElement": "container",
                "breakLine": False,
                "sortOrder": (i + 1) * 10,
            },
            {code: _node(config)},
        )

    return {
        GROUP_CODE: _node(
            {
                "componentType": "fieldset",
                "label": "Product Details",
                "collapsible": False,
                "sortOrder": 10,
            },
            children,
        )
    }


def build_base_data(product):
    """Form data keyed by product id; ``video_link`` is the raw column text."""
    return {
        product.id: {
            "product": {
                "sku": product.sku,
                "name": product.name,
                "type_id": product.type_id,
                "status": product.status,
                "video_link": product.video_link,
            }
        }
    }
