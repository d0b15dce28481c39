"""
catalog.py — Pydantic models for raw catalog API records.

The catalog API speaks Indonesian field names (nama, gambar, tanggal, lokasi,
daerah, provinsi, tipe). These models document the wire shape and are used
to build the seed catalog; the live fetch path keeps records as plain dicts
because the normalizer needs to see which keys are *present*, not just which
values are set.

Example event record:

  {
    "id": 12,
    "nama": "Festival Danau Toba",
    "gambar": "https://cdn.example.org/toba.jpg",
    "tanggal": "2024-08-17",
    "lokasi": "Parapat",
    "daerah": { "id": 3, "nama": "Simalungun" }
  }

Example culture record:

  {
    "id": 4,
    "nama": "Tari Saman",
    "gambar": null,
    "tipe": "Tarian",
    "daerah": { "nama": "Gayo Lues" },
    "provinsi": { "nama": "Aceh" }
  }
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict


class RegionRef(BaseModel):
    """Nested reference to a region (daerah) or province (provinsi)."""

    model_config = ConfigDict(extra="allow")

    id: Optional[Union[int, str]] = None
    nama: Optional[str] = None


class RawEventRecord(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Union[int, str]
    nama: str
    gambar: Optional[str] = None
    tanggal: str                       # ISO-8601 date or datetime
    lokasi: str
    daerah: Optional[RegionRef] = None


class RawCultureRecord(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Union[int, str]
    nama: str
    gambar: Optional[str] = None
    tipe: Optional[str] = None         # e.g. "Tarian", "Kuliner", "Upacara"
    daerah: Optional[RegionRef] = None
    provinsi: Optional[RegionRef] = None


class RawProvinceRecord(BaseModel):
    """Provinces are only counted by the dashboard."""

    model_config = ConfigDict(extra="allow")

    id: Union[int, str]
    nama: str
