#!/usr/bin/env python3
"""Seed sample colour options and products with video links for local development."""
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from videolink import create_app
from videolink.extensions import db
from videolink.models.product import Product
from videolink.services.option_source import add_option
from videolink.services.video_link_store import VideoLinkStore

app = create_app()

COLORS = ["Red", "Navy Blue", "Emerald Green", "Black", "White"]

SAMPLE_PRODUCTS = [
    {
        "sku": "TEE-CLASSIC",
        "name": "Classic Crew T-Shirt",
        "type_id": "configurable",
        "videos": {
            "Red": "https://videos.example.com/tee-classic/red.mp4",
            "Black": "https://videos.example.com/tee-classic/black.mp4",
        },
    },
    {
        "sku": "HOODIE-ZIP",
        "name": "Zip Hoodie",
        "type_id": "configurable",
        "videos": {
            "Navy Blue": "https://videos.example.com/hoodie-zip/navy.mp4",
        },
    },
    {
        "sku": "CAP-PLAIN",
        "name": "Plain Cap",
        "type_id": "simple",
        "videos": {},
    },
]


def seed():
    with app.app_context():
        if Product.query.first():
            print("Products already exist — skipping seed.")
            return

        attribute = app.config["VIDEO_LINK_ATTRIBUTE"]
        options = {label: add_option(attribute, label) for label in COLORS}
        store = VideoLinkStore(db.session)

        for item in SAMPLE_PRODUCTS:
            product = Product(sku=item["sku"], name=item["name"], type_id=item["type_id"])
            db.session.add(product)
            db.session.commit()

            links = {options[color].id: url for color, url in item["videos"].items()}
            if links:
                store.set(product.id, links, admin="seed")

            print(f"  Created {item['sku']}: {len(links)} video link(s)")

        print(f"\nSeeded {len(SAMPLE_PRODUCTS)} products.")


if __name__ == "__main__":
    seed()
