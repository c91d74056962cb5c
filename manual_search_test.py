from app.core import config
from ingestion.ingest import load_users
from app.core.exceptions import SearchError
from search.engine import search
from search.request import SearchRequest

def read_int(prompt):
    raw = input(prompt).strip()
    if not raw:
        return 0
    try:
        return int(raw)
    except ValueError:
        print(f"  '{raw}' is not a number, using 0")
        return 0

# -------------------- Manual Search Testing --------------------
if __name__ == "__main__":
    print("\n=== Manual Search Testing for the user search engine ===\n")

    users = load_users(config.dataset_path())

    print(f"Loaded {len(users)} users:")
    for user in users:
        print(f"  {user.id}: {user.name} ({user.age})")
    print("\nType a search query (or 'exit' to quit):\n")

    while True:
        query = input("> ")
        if query.strip().lower() in ["exit", "quit"]:
            break

        request = SearchRequest(
            query=query,
            order_field=input("  order field (Name/Id/Age): ").strip(),
            order_by=read_int("  order by (1/-1/0): "),
            limit=read_int("  limit: "),
            offset=read_int("  offset: "),
        )

        try:
            results = search(users, request)
        except SearchError as e:
            print(f"\n  Error [{e.code}]: {e.message}\n")
            continue

        print("\nResults:")
        if not results:
            print("  No results\n")
        else:
            for user in results:
                print(
                    f"  Id: {user.id}, \n"
                    f"  Name: {user.name}, \n"
                    f"  Age: {user.age}, \n"
                    f"  Gender: {user.gender}\n"
                )
            print("")
