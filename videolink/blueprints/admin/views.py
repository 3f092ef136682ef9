"""Admin JSON API for the product edit form and its video links."""
import hmac
import logging
from flask import abort, current_app, jsonify, request
from videolink.blueprints.admin import admin_bp
from videolink.extensions import db
from videolink.models.product import Product
from videolink.services.form_extender import FIELD, VideoLinkFormExtender, product_fields
from videolink.services.serializer import VideoLinkSerializer
from videolink.services.video_link_store import VideoLinkStore

logger = logging.getLogger(__name__)


@admin_bp.before_request
def require_admin_token():
    """X-Admin-Token header must match ADMIN_API_TOKEN."""
    expected = current_app.config["ADMIN_API_TOKEN"]
    token = request.headers.get("X-Admin-Token", "")
    if not expected or not hmac.compare_digest(token, expected):
        logger.warning("Rejected admin request to %s", request.path)
        abort(403)


def _admin():
    return request.headers.get("X-Admin-User") or "admin"


def _extender():
    serializer = VideoLinkSerializer()
    store = VideoLinkStore(db.session, serializer)
    return VideoLinkFormExtender(
        store,
        serializer,
        attribute_code=current_app.config["VIDEO_LINK_ATTRIBUTE"],
        sort_order=current_app.config["VIDEO_LINK_SORT_ORDER"],
        form_attributes=current_app.config["FORM_ATTRIBUTES"],
    )


def _get_product_or_404(product_id):
    product = db.session.get(Product, product_id)
    if not product:
        abort(404)
    return product


def _json_body():
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        abort(400, description="Request body must be a JSON object.")
    return body


@admin_bp.errorhandler(400)
def bad_request(e):
    return jsonify(error=e.description), 400


@admin_bp.route("/products/<int:product_id>/form")
def product_form(product_id):
    """Product edit form metadata and data, with video link fields."""
    product = _get_product_or_404(product_id)
    return jsonify(_extender().load_form(product))


@admin_bp.route("/products/<int:product_id>/form", methods=["POST"])
def save_product_form(product_id):
    _get_product_or_404(product_id)
    body = _json_body()
    links = product_fields(body).get(FIELD)
    if links is not None and not isinstance(links, dict):
        abort(400, description="product.video_link must be an object.")

    extender = _extender()
    product = extender.save_form(product_id, body, admin=_admin())
    return jsonify(extender.load_form(product))


@admin_bp.route("/products/<int:product_id>/video-links")
def video_links(product_id):
    _get_product_or_404(product_id)
    links = _extender().store.get(product_id)
    return jsonify(product_id=product_id, video_links=links)


@admin_bp.route(
    "/products/<int:product_id>/video-links/<int:option_id>", methods=["PUT"]
)
def set_video_link(product_id, option_id):
    _get_product_or_404(product_id)
    url = _json_body().get("url")
    if not isinstance(url, str) or not url.strip():
        abort(400, description="url is required.")

    store = _extender().store
    store.set_link(product_id, option_id, url.strip(), admin=_admin())
    return jsonify(product_id=product_id, video_links=store.get(product_id))


@admin_bp.route(
    "/products/<int:product_id>/video-links/<int:option_id>", methods=["DELETE"]
)
def clear_video_link(product_id, option_id):
    _get_product_or_404(product_id)
    store = _extender().store
    store.clear_link(product_id, option_id, admin=_admin())
    return jsonify(product_id=product_id, video_links=store.get(product_id))
