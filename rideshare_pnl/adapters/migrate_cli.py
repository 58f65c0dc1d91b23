"""CLI adapter bringing the record store up to the current schema."""

from rideshare_pnl.infrastructure.container import (
    build_record_store,
    migrate_record_store,
)


def main() -> None:
    """Run pending record store migrations."""
    store = build_record_store()
    result = migrate_record_store(store)

    if not result.applied:
        print(f"Record store already at schema v{result.to_version}.")
        return
    print(
        f"Migrated record store from v{result.from_version} "
        f"to v{result.to_version}: "
        f"dropped {result.dropped_legacy_earnings} legacy earnings, "
        f"{result.dropped_mileage_entries} mileage entries; "
        f"assigned {result.backfilled_ids} ids."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
