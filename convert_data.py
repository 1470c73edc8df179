import logging
from pathlib import Path

from convert_items import build_items
from convert_nodes import build_nodes
from dataset_io import save_dataset

# === Config (adjust paths if needed) ===
ITEMS_INPUT_PATH = Path("items.json")
ITEMS_OUTPUT_PATH = Path("items.out.json")
NODES_INPUT_PATH = Path("nodes.json")
NODES_OUTPUT_PATH = Path("nodes.out.json")
LOG_PATH = Path("convert_data.log")


def main():
    logging.basicConfig(
        filename=LOG_PATH,
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    # Both inputs are converted before anything is written.
    print(f"Converting items from '{ITEMS_INPUT_PATH}'...")
    items = build_items(ITEMS_INPUT_PATH)
    print(f"Converting nodes from '{NODES_INPUT_PATH}'...")
    nodes = build_nodes(NODES_INPUT_PATH)

    save_dataset(ITEMS_OUTPUT_PATH, items)
    print(f"Saved {len(items)} items to '{ITEMS_OUTPUT_PATH}'.")
    save_dataset(NODES_OUTPUT_PATH, nodes)
    print(f"Saved {len(nodes)} nodes to '{NODES_OUTPUT_PATH}'.")

    logging.info("Converted %d items and %d nodes", len(items), len(nodes))
    print("Conversion completed.")


if __name__ == "__main__":
    main()
