from __future__ import annotations

import sqlite3
import zipfile
from datetime import datetime
from pathlib import Path

from maniuz.config import settings


def make_backup() -> str:
    """
    ZIP: database snapshot + generated order PDFs.
    Returns the path to the zip.
    """
    backups_dir = Path(settings.backup_dir)
    backups_dir.mkdir(parents=True, exist_ok=True)
    db_path = Path(settings.db_path)
    export_dir = Path(settings.export_dir)

    ts = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    zip_path = backups_dir / f"backup_{ts}.zip"
    snapshot = backups_dir / f".snapshot_{ts}.db"

    try:
        # снимок через sqlite backup API
        if db_path.exists():
            src = sqlite3.connect(str(db_path))
            dst = sqlite3.connect(str(snapshot))
            try:
                src.backup(dst)
            finally:
                dst.close()
                src.close()

        with zipfile.ZipFile(zip_path, "w", compression=zipfile.ZIP_DEFLATED) as z:
            if snapshot.exists():
                z.write(snapshot, arcname=f"db/{db_path.name}")
            if export_dir.exists():
                for p in export_dir.glob("*.pdf"):
                    z.write(p, arcname=f"orders/{p.name}")
    finally:
        if snapshot.exists():
            snapshot.unlink()

    return str(zip_path)
