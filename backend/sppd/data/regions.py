"""Destination lists per travel type, and transportation modes."""

from typing import List

from sppd.models.assignment import TravelType

# Regencies and cities of Nusa Tenggara Barat (within-region travel)
NTB_DESTINATIONS: List[str] = [
    "Mataram",
    "Lombok Barat",
    "Lombok Tengah",
    "Lombok Timur",
    "Lombok Utara",
    "Sumbawa Barat",
    "Sumbawa",
    "Dompu",
    "Bima",
    "Kota Bima",
]

# Provinces of Indonesia other than NTB (out-of-region travel)
PROVINCE_DESTINATIONS: List[str] = [
    "Aceh",
    "Sumatera Utara",
    "Sumatera Barat",
    "Riau",
    "Kepulauan Riau",
    "Jambi",
    "Sumatera Selatan",
    "Kepulauan Bangka Belitung",
    "Bengkulu",
    "Lampung",
    "DKI Jakarta",
    "Jawa Barat",
    "Banten",
    "Jawa Tengah",
    "DI Yogyakarta",
    "Jawa Timur",
    "Bali",
    "Nusa Tenggara Timur",
    "Kalimantan Barat",
    "Kalimantan Tengah",
    "Kalimantan Selatan",
    "Kalimantan Timur",
    "Kalimantan Utara",
    "Sulawesi Utara",
    "Gorontalo",
    "Sulawesi Tengah",
    "Sulawesi Barat",
    "Sulawesi Selatan",
    "Sulawesi Tenggara",
    "Maluku",
    "Maluku Utara",
    "Papua",
    "Papua Barat",
    "Papua Barat Daya",
    "Papua Tengah",
    "Papua Pegunungan",
    "Papua Selatan",
]

TRANSPORTATION_MODES: List[str] = [
    "Kendaraan Dinas",
    "Kendaraan Umum",
    "Kendaraan Dinas / Umum",
    "Kapal Laut",
    "Pesawat Udara",
]


def destinations_for(travel_type: TravelType) -> List[str]:
    """Valid destinations for a travel type."""
    if travel_type == TravelType.OUT_OF_REGION:
        return PROVINCE_DESTINATIONS
    return NTB_DESTINATIONS


def is_valid_destination(travel_type: TravelType, destination: str) -> bool:
    return destination in destinations_for(travel_type)
