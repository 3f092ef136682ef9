"""Product-scoped storage of per-option video links."""
import logging

from videolink.models.audit_log import AuditLog
from videolink.models.product import Product
from videolink.services.serializer import VideoLinkSerializer, normalize_option_id

logger = logging.getLogger(__name__)

SYSTEM_ADMIN = "system"


class VideoLinkStore:
    """Reads and writes the ``video_link`` column of a product.

    The whole mapping is rewritten on every save, so two concurrent edits of
    the same product resolve as last write wins.
    """

    def __init__(self, session, serializer=None):
        self.session = session
        self.serializer = serializer or VideoLinkSerializer()

    def get(self, product_id):
        product = self.session.get(Product, product_id)
        if not product:
            return {}
        return dict(self.serializer.decode(product.video_link))

    def set(self, product_id, mapping, admin=None, action="SET_VIDEO_LINKS"):
        """Replace the product's links. Returns the product, or None if unknown."""
        product = self.session.get(Product, product_id)
        if not product:
            logger.info("Video links not saved: product %s not found", product_id)
            return None

        product.video_link = self.serializer.encode(mapping)
        self.session.add(
            AuditLog(
                admin=admin or SYSTEM_ADMIN,
                action=action,
                product_id=product.id,
                payload={
                    "video_links": {
                        str(k): v
                        for k, v in self.serializer.decode(product.video_link).items()
                    }
                },
            )
        )
        self.session.commit()
        logger.info("Saved video links for product %s (%s)", product.sku, action)
        return product

    def set_link(self, product_id, option_id, url, admin=None):
        links = self.get(product_id)
        links[normalize_option_id(option_id)] = url
        return self.set(product_id, links, admin=admin, action="SET_VIDEO_LINK")

    def clear_link(self, product_id, option_id, admin=None):
        links = self.get(product_id)
        links.pop(normalize_option_id(option_id), None)
        return self.set(product_id, links, admin=admin, action="CLEAR_VIDEO_LINK")


def prune_blank_links(mapping):
    """Drop options whose submitted link is empty or whitespace."""
    return {
        normalize_option_id(k): v.strip()
        for k, v in mapping.items()
        if isinstance(v, str) and v.strip()
    }
