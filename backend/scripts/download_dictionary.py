#!/usr/bin/env python3
"""Download the full OpenRussian noun dictionary.

The bundled ``nouns.tsv`` only covers a few dozen common nouns. The
OpenRussian export has the same columns, so pointing
NOUN_DICTIONARY_PATH at its ``nouns.csv`` swaps in the full dictionary.

Run with: python3 -m scripts.download_dictionary [--dest DIR] [--force] [--check]
"""
import argparse
import sys
import zipfile
from pathlib import Path
from urllib.error import URLError
from urllib.request import urlretrieve

from core.errors import AppErrorException
from languages.russian.dictionary import NounDictionary

DATA_DIR = Path(__file__).parent.parent.parent / "data" / "sources" / "openrussian"

SOURCE = {
    "name": "OpenRussian Dictionary",
    "url": "https://github.com/Badestrand/russian-dictionary/raw/master/dist/openrussian-csv.zip",
    "member": "nouns.csv",
    "license": "CC-BY-SA-4.0",
}


def download_with_progress(url: str, dest: Path) -> bool:
    """Download a file with progress indicator."""
    print(f"  Downloading: {url}")
    print(f"  Destination: {dest}")

    def progress(block_num, block_size, total_size):
        downloaded = block_num * block_size
        if total_size > 0:
            percent = min(100, downloaded * 100 // total_size)
            mb_downloaded = downloaded / (1024 * 1024)
            mb_total = total_size / (1024 * 1024)
            sys.stdout.write(f"\r  Progress: {percent}% ({mb_downloaded:.1f}/{mb_total:.1f} MB)")
            sys.stdout.flush()

    try:
        urlretrieve(url, dest, reporthook=progress)
        print()
        return True
    except URLError as e:
        print(f"\n  Error downloading: {e}")
        return False


def extract_nouns(archive_path: Path, dest_dir: Path, member: str) -> Path | None:
    """Extract the noun table from the export archive."""
    print(f"  Extracting: {member} from {archive_path.name}")
    try:
        with zipfile.ZipFile(archive_path) as zf:
            name = next((n for n in zf.namelist() if n.endswith(member)), None)
            if name is None:
                print(f"  {member} not found in archive")
                return None
            target = dest_dir / member
            target.write_bytes(zf.read(name))
            return target
    except (zipfile.BadZipFile, OSError) as e:
        print(f"  Error extracting: {e}")
        return None


def check_dictionary(path: Path) -> bool:
    """Load the dictionary once to make sure the engine can read it."""
    try:
        size = len(NounDictionary(path))
    except AppErrorException as e:
        print(f"  ✗ {e.error.message}")
        return False
    print(f"  ✓ {size} lookup keys in {path}")
    return True


def main():
    parser = argparse.ArgumentParser(description="Download the OpenRussian noun dictionary")
    parser.add_argument("--dest", type=Path, default=DATA_DIR, help="Target directory")
    parser.add_argument("--force", action="store_true", help="Force re-download existing files")
    parser.add_argument("--check", action="store_true", help="Only check an already downloaded dictionary")
    args = parser.parse_args()

    dest_dir: Path = args.dest
    nouns = dest_dir / SOURCE["member"]

    if args.check:
        sys.exit(0 if check_dictionary(nouns) else 1)

    print(f"Source: {SOURCE['name']} ({SOURCE['license']})")
    dest_dir.mkdir(parents=True, exist_ok=True)
    archive_path = dest_dir / SOURCE["url"].split("/")[-1]

    if archive_path.exists() and not args.force:
        print(f"  Archive already exists: {archive_path}")
        print("  Use --force to re-download")
    elif not download_with_progress(SOURCE["url"], archive_path):
        sys.exit(1)

    extracted = extract_nouns(archive_path, dest_dir, SOURCE["member"])
    if extracted is None or not check_dictionary(extracted):
        sys.exit(1)

    print("\nNext step:")
    print(f"  export NOUN_DICTIONARY_PATH={extracted}")


if __name__ == "__main__":
    main()
