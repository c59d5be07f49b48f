# autoshop/catalog.py
from typing import List

from .config import settings
from .models import Car, CarAccessory, Product
from .store import Store

_ECOSPORT_IMAGES = [
    "https://uks-cdn.pinewooddms.com/b04b90f8-2e99-463d-a023-7e3c771fb388/vehicles/1935a96a-3bb8-485e-affc-132707e733c1.jpg?",
    "https://uks-cdn.pinewooddms.com/b04b90f8-2e99-463d-a023-7e3c771fb388/vehicles/4cb99337-5c1b-4f0e-9bb7-3683f23520de.jpg?",
]

_ECOSPORT_SPECS = {
    "Key Features": [
        "Bluetooth", "Climate Control", "Air Conditioning", "Ask for a Test Drive Today",
        "24 Month Guarantee Available", "2 x Keys with car",
    ],
    "Engine": ["Auto", "Petrol"],
}


def ecosport(color: str) -> Car:
    return Car(
        name="Ford Ecosport",
        price=5000000,
        category="Used Cars",
        description=(
            "The EcoSport is easy to drive and spacious inside. The 1.0-litre petrol "
            "engine is a popular choice because of its efficiency."
        ),
        images=list(_ECOSPORT_IMAGES),
        specifications={k: list(v) for k, v in _ECOSPORT_SPECS.items()},
        color=color,
        make="Ford",
        model="1.5 Zetec 5dr 2016",
        year="2016",
    )


def door_lights() -> CarAccessory:
    return CarAccessory(
        name="Toyota Shadow Logo Led Light (For 4 Doors)",
        price=14000,
        category="Led Lights",
        description=(
            "TOYOTA LED HOLOGRAM SAFETY LIGHTS(free batteries included): Stay safe at night "
            "when stepping out of your cars in poorly lit areas with our classy, elegant "
            "light emitting diode car door lights."
        ),
        images=["https://ng.jumia.is/unsafe/fit-in/500x500/filters:fill(white)/product/74/552546/1.jpg?6525"],
        specifications={"Key Features": ["Toyota LED Hologram Safety Lights, Free batteries included"]},
    )


def sample_products() -> List[Product]:
    return [ecosport("yellow"), ecosport("black"), door_lights()]


def new_auto_shop() -> Store:
    """A store configured from settings, with nothing in stock."""
    return Store(settings.STORE_NAME, *settings.supported_product_types)
