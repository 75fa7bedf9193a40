import entangle
from entangle.core import summarize


def main() -> None:
    server = entangle.run(port=0)
    client = server.client()

    alice = [client.create("alice") for _ in range(3)]
    bob = client.create("bob")

    for pair in alice:
        value = pair.measure()
        snap = pair.snapshot()
        print(f"pair {pair.id}: measured {value} -> ({snap.particle1}, {snap.particle2}) entangled={pair.verify()}")

    print("alice owns", client.list_by_owner("alice"))
    print("bob's pair verified before measurement:", bob.verify())

    try:
        alice[0].measure()
    except entangle.AlreadyMeasured as ex:
        print("second measurement rejected:", ex)

    print(summarize(server.registry))
    server.stop()


if __name__ == "__main__":
    main()
