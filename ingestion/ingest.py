from models.user import User, InvalidUserError
from app.core.exceptions import DatasetError
import logging
from typing import Optional, Iterable, List, Tuple
import os
import xml.etree.ElementTree as ET

ROW_FIELDS = ("id", "first_name", "last_name", "age", "about", "gender")

def ingest_one(raw: dict) -> Optional[User]:
    if not isinstance(raw, dict):
        logging.warning("Skipping row, not a dict: %r", raw)
        return None

    try:
        user = User.from_dict(raw)
    except InvalidUserError as e:
        logging.warning("Skipping row id=%s: %s", raw.get("id", "<missing>"), e)
        return None

    return user

def ingest_many(raw_list: Iterable[dict], continue_on_error=True) -> List[User]:
    results = []
    ok_count = 0
    skipped_count = 0

    for raw in raw_list:
        user = ingest_one(raw)

        if user is None:
            if not continue_on_error:
                raise DatasetError("Invalid row during batch ingestion")
            skipped_count += 1
            continue

        ok_count += 1
        results.append(user)

    logging.info("Ingested users: OK=%s SKIP=%s", ok_count, skipped_count)

    return results

def load_xml_file(path):
    """
    Yield one raw dict per <row> element of a dataset file shaped like

        <root>
          <row><id>0</id><first_name>..</first_name>...</row>
        </root>

    Tags missing from a row come back as None.
    """
    if not os.path.exists(path):
        raise DatasetError(f"Dataset file not found: {path}")

    try:
        tree = ET.parse(path)
    except ET.ParseError as e:
        raise DatasetError(f"Dataset file is not valid XML: {e}") from e

    for row in tree.getroot().iter("row"):
        yield {field: row.findtext(field) for field in ROW_FIELDS}

def load_users(path, continue_on_error=True) -> Tuple[User, ...]:
    users = ingest_many(load_xml_file(path), continue_on_error=continue_on_error)

    seen = set()
    for user in users:
        if user.id in seen:
            raise DatasetError(f"Duplicate user id={user.id} in {path}")
        seen.add(user.id)

    return tuple(users)
