import argparse, datetime, json, os
from dataclasses import dataclass
from bitarray import bitarray
from tqdm import tqdm
from combinatorics import subset_count, unlinearize_subset
from tickets import is_fillable, merge_into, new_ticket, ticket_numbers, ticket_subsets

SETS_DIR = "sets"


@dataclass(frozen=True)
class LottoPsychicInput:
    n: int  # size of the candidate set of promised numbers 1..n
    k: int  # count of numbers per ticket
    j: int  # minimum count of promised numbers in a ticket (not consulted yet)
    l: int  # matching numbers needed to win a prize


class InvalidInputError(ValueError):
    def __init__(self, params, reason):
        super().__init__(f"invalid input {params}: {reason}")
        self.params = params
        self.reason = reason


def _check(params):
    if min(params.n, params.k, params.l) < 0:
        raise InvalidInputError(params, "n, k and l must be non-negative")
    count = subset_count(params.n, params.l)
    if count == 0:
        raise InvalidInputError(params, f"no {params.l}-subsets of {params.n} numbers to cover")
    if params.k < params.l:
        raise InvalidInputError(params, f"a ticket of {params.k} numbers cannot hold {params.l}")
    return count


def solve(params, progress=False):
    """Greedy first-fit covering of every l-subset of 1..n by k-number tickets.

    Subsets are visited by rank. An uncovered one goes into the first ticket
    with room for its missing numbers, and every l-subset of the grown ticket
    is then marked covered. When no ticket has room a new one is opened.
    Returns the tickets as lists of slots (None = free).
    """
    count = _check(params)
    n, k, l = params.n, params.k, params.l

    covered = bitarray(count)
    covered.setall(False)
    tickets = [new_ticket(k)]

    for si in tqdm(range(count), desc="Subsets", unit="subsets", disable=not progress, leave=False):
        if covered[si]:
            continue

        subset = unlinearize_subset(n, l, si)

        placed = False
        for ti, ticket in enumerate(tickets):
            fillable, already_filled = is_fillable(subset, ticket)
            if already_filled:
                covered[si] = True
                placed = True
                break
            if not fillable:
                continue

            tickets[ti] = merge_into(subset, ticket)
            for rank, _ in ticket_subsets(tickets[ti], n, l):
                covered[rank] = True
            placed = True
            break

        if not placed:
            ticket = new_ticket(k)
            ticket[:l] = subset
            tickets.append(ticket)
            covered[si] = True

    return tickets


def print_tickets(tickets):
    print("<Tickets>")
    for i, numbers in enumerate(tickets, 1):
        print(f"Ticket n°{i} ")
        print(" ".join(map(str, numbers)))
    print("</Tickets>")


def lotto_psychic(params, sink=None, progress=False):
    """Solve and report each ticket to sink(index, numbers), 1-based index.

    Without a sink the tickets are printed as a <Tickets> block.
    """
    tickets = [ticket_numbers(t) for t in solve(params, progress=progress)]
    if sink is None:
        print_tickets(tickets)
        return
    for i, numbers in enumerate(tickets, 1):
        sink(i, numbers)


def save_tickets(tickets, filename=None):
    """Write tickets one per line, comma separated. Defaults to a timestamped file in sets/."""
    if filename is None:
        timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
        filename = os.path.join(SETS_DIR, f"psychic_set_{timestamp}.txt")
    os.makedirs(os.path.dirname(filename) or ".", exist_ok=True)
    with open(filename, "w") as f:
        for t in tickets:
            f.write(",".join(map(str, t)) + "\n")
    return filename


def load_tickets(filename):
    with open(filename) as f:
        if filename.endswith(".json"):
            return [tuple(t) for t in json.load(f)]
        return [tuple(int(x) for x in line.strip().split(",")) for line in f if line.strip()]


def main(argv=None):
    parser = argparse.ArgumentParser(description="Tickets guaranteeing every l-subset of 1..n is matched")
    parser.add_argument("--n", type=int, required=True, help="numbers in play (1..n)")
    parser.add_argument("--k", type=int, required=True, help="numbers per ticket")
    parser.add_argument("--j", type=int, default=0, help="promised numbers per ticket (accepted, not used)")
    parser.add_argument("--l", type=int, required=True, help="matching numbers to guarantee")
    parser.add_argument("--out", help="write the tickets as JSON to this file")
    parser.add_argument("--save", action="store_true", help=f"write a timestamped ticket file under {SETS_DIR}/")
    parser.add_argument("--verify", action="store_true", help="check the full cover with the compiled checker")
    parser.add_argument("--progress", action="store_true")
    args = parser.parse_args(argv)

    params = LottoPsychicInput(n=args.n, k=args.k, j=args.j, l=args.l)
    print(f"[*] Lotto psychic: n={params.n} k={params.k} j={params.j} l={params.l}")
    try:
        tickets = [ticket_numbers(t) for t in solve(params, progress=args.progress)]
    except InvalidInputError as e:
        print(f"[!] {e}")
        parser.error(e.reason)

    print(f"[+] {len(tickets)} tickets cover all {subset_count(params.n, params.l)} {params.l}-subsets")
    print_tickets(tickets)

    if args.out:
        with open(args.out, "w") as f:
            json.dump([list(t) for t in tickets], f)
        print(f"[✓] Tickets saved as {args.out}")
    if args.save:
        print(f"[✓] Tickets saved as {save_tickets(tickets)}")
    if args.verify:
        from proof_fullcover import prove
        prove(tickets, params.n, params.l)
    return tickets


if __name__ == "__main__":
    main()
