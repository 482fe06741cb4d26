from backoffice.storage.store import ResourceStore
from backoffice.utils.seed import seed_sample_data


def seed_demo():
    # Only meaningful when DATABASE_URL points at a persistent database
    store = ResourceStore()
    try:
        created = seed_sample_data(store)
    finally:
        store.close()
    print(f"Seeded {created} demo records.")


if __name__ == "__main__":
    seed_demo()
