import argparse
from common import covers_all, tickets_coverage
from combinatorics import subset_count
from psychic import load_tickets

def prove(tickets, n, l):
    total = subset_count(n, l)
    if not covers_all(tickets, n, l):
        covered = tickets_coverage(tickets, n, l)
        print(f"[!] Missing cover: {covered}/{total} ({covered/total*100:.4f}%)  tickets: {len(tickets)}")
        return False
    print("FULL COVER ✔  tickets:", len(tickets))
    return True

if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("tickets", help="ticket file (.json or comma separated lines)")
    parser.add_argument("--n", type=int, required=True)
    parser.add_argument("--l", type=int, required=True)
    args = parser.parse_args()
    assert prove(load_tickets(args.tickets), args.n, args.l)
