"""Example script logging to the console, a rotating file and memory.

Run with:
    LOG_LEVEL=debug python examples/basic_logging.py

Output:
    Console   - coloured lines (set NO_COLOUR=1 for plain text)
    app.log   - JSON lines, rotated at 1 MiB, 3 backups kept
    dump.log  - last 50 entries, written by MemoryTransport.dump()
"""

import logging

from viol import FileTransport, Logger, MemoryTransport, ViolHandler

# Root logger for this script
logger = Logger("shop")
logger.add_transport(FileTransport("app.log", max_size=1024 * 1024, max_files=3))

recent = MemoryTransport(max_logs=50, filename="dump.log")
logger.add_transport(recent)

# Forward records from libraries that use the logging module
logging.getLogger().addHandler(ViolHandler(logger))
logging.getLogger().setLevel(logging.DEBUG)


def checkout(order_id: int) -> None:
    """Log a checkout under the orders scope."""
    orders = logger.child("orders").with_metadata({"order_id": order_id})
    orders.debug("validating basket")
    orders.info("order placed", "total", 42.5)


if __name__ == "__main__":
    logger.info("shop started")
    checkout(1001)
    logging.getLogger("payments.gateway").warning("slow response")
    print(f"dumped {len(recent)} entries to {recent.dump()}")
