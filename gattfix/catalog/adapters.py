"""Mock adapter data-set descriptions.

Each data set names the adapter state and the GATT database a simulator
should present when a harness selects it.  Identifiers are canonicalised to
UUID strings against the identifier registry on load.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from gattfix.core import config
from gattfix.core.errors import DataFileError, UnknownDataSetError
from gattfix.core.log import print_and_log, LOG__CATALOG
from gattfix.bt_ref.loader import data_path, load_yaml_mapping
from gattfix.bt_ref.registry import IdentifierRegistry, get_registry


@dataclass(frozen=True)
class MockDescriptor:
    uuid: str
    value: bytes = b""


@dataclass(frozen=True)
class MockCharacteristic:
    uuid: str
    value: bytes = b""
    descriptors: Tuple[MockDescriptor, ...] = ()


@dataclass(frozen=True)
class MockService:
    uuid: str
    characteristics: Tuple[MockCharacteristic, ...] = ()


@dataclass(frozen=True)
class MockDevice:
    name: str
    address: str
    connectable: bool = False
    uuids: Tuple[str, ...] = ()
    services: Tuple[MockService, ...] = ()


@dataclass(frozen=True)
class AdapterDataSet:
    name: str
    present: bool = True
    powered: bool = False
    discoverable: bool = False
    devices: Tuple[MockDevice, ...] = field(default=())

    def to_dict(self) -> Dict:
        return {
            "name": self.name,
            "present": self.present,
            "powered": self.powered,
            "discoverable": self.discoverable,
            "devices": [
                {
                    "name": d.name,
                    "address": d.address,
                    "connectable": d.connectable,
                    "uuids": list(d.uuids),
                    "services": [
                        {
                            "uuid": s.uuid,
                            "characteristics": [
                                {
                                    "uuid": c.uuid,
                                    "value": list(c.value),
                                    "descriptors": [
                                        {"uuid": x.uuid, "value": list(x.value)}
                                        for x in c.descriptors
                                    ],
                                }
                                for c in s.characteristics
                            ],
                        }
                        for s in d.services
                    ],
                }
                for d in self.devices
            ],
        }


class _Builder:
    """Turns the YAML tree into frozen records, canonicalising identifiers."""

    def __init__(self, registry: IdentifierRegistry, path):
        self.registry = registry
        self.path = path

    def uuid(self, raw, where: str) -> str:
        result = self.registry.canonicalize(raw)
        if not isinstance(result, str):
            raise DataFileError(self.path, f"{where}: {result.message}")
        return result

    def descriptor(self, entry, where) -> MockDescriptor:
        return MockDescriptor(self.uuid(entry["uuid"], where), bytes(entry.get("value") or []))

    def characteristic(self, entry, where) -> MockCharacteristic:
        return MockCharacteristic(
            uuid=self.uuid(entry["uuid"], where),
            value=bytes(entry.get("value") or []),
            descriptors=tuple(self.descriptor(d, where) for d in entry.get("descriptors") or []),
        )

    def service(self, entry, where) -> MockService:
        return MockService(
            uuid=self.uuid(entry["uuid"], where),
            characteristics=tuple(
                self.characteristic(c, where) for c in entry.get("characteristics") or []
            ),
        )

    def device(self, entry, where) -> MockDevice:
        return MockDevice(
            name=str(entry["name"]),
            address=str(entry["address"]),
            connectable=bool(entry.get("connectable", False)),
            uuids=tuple(self.uuid(u, where) for u in entry.get("uuids") or []),
            services=tuple(self.service(s, where) for s in entry.get("services") or []),
        )

    def data_set(self, entry) -> AdapterDataSet:
        where = str(entry.get("name", "<unnamed>"))
        try:
            return AdapterDataSet(
                name=entry["name"],
                present=bool(entry.get("present", True)),
                powered=bool(entry.get("powered", False)),
                discoverable=bool(entry.get("discoverable", False)),
                devices=tuple(self.device(d, where) for d in entry.get("devices") or []),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise DataFileError(self.path, f"{where}: {e!r}") from e


def load_adapter_data_sets(
    path: Union[str, Path], registry: Optional[IdentifierRegistry] = None
) -> Dict[str, AdapterDataSet]:
    """Load data sets from *path*, keyed by name in declaration order."""
    data = load_yaml_mapping(path)
    builder = _Builder(registry or get_registry(), path)
    data_sets: Dict[str, AdapterDataSet] = {}
    for entry in data.get("adapters") or []:
        if not isinstance(entry, dict):
            raise DataFileError(path, f"adapter entry is not a mapping: {entry!r}")
        data_set = builder.data_set(entry)
        if data_set.name in data_sets:
            raise DataFileError(path, f"duplicate data set {data_set.name}")
        data_sets[data_set.name] = data_set
    print_and_log(f"[+] Loaded {len(data_sets)} adapter data sets", LOG__CATALOG)
    return data_sets


_data_sets: Optional[Dict[str, AdapterDataSet]] = None


def adapter_data_sets() -> List[AdapterDataSet]:
    """All packaged data sets in declaration order."""
    global _data_sets
    if _data_sets is None:
        _data_sets = load_adapter_data_sets(data_path(config.ADAPTERS_FILE))
    return list(_data_sets.values())


def adapter_data_set(name: str) -> AdapterDataSet:
    """Return the data set called *name*; raises UnknownDataSetError."""
    for data_set in adapter_data_sets():
        if data_set.name == name:
            return data_set
    raise UnknownDataSetError(name)
