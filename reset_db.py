from backoffice.storage.store import ResourceStore

store = ResourceStore()
store.reset()
store.close()

print("Database reset: all back office tables dropped and recreated.")
