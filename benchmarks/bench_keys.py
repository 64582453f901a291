"""Key operation benchmarks for HostKeys.

Measures CRT private exponentiation against a plain modular
exponentiation, public key construction (subgroup proof verification),
proof generation, hashing and key chain rotation.
"""

import statistics
import time
from datetime import datetime, timedelta, timezone

from cryptography.hazmat.primitives.asymmetric import rsa

from hostkeys import (
    Exponent,
    GroupWithKnownOrder,
    KeyChainItem,
    KeyPair,
    PrivateKey,
    PrivateKeyChain,
    PublicKey,
    generate_hash,
)
from hostkeys.constants import TROPICAL_YEAR

ITERATIONS = 200
WARMUP = 10
PUBLIC_EXPONENT = 65537
KEY_SIZE = 2048


def _percentile(data: list[float], pct: float) -> float:
    """Return the *pct*-th percentile from a sorted list."""
    s = sorted(data)
    idx = int(len(s) * pct / 100)
    return s[min(idx, len(s) - 1)]


def _bench(fn, n: int = ITERATIONS, warmup: int = WARMUP) -> dict:
    """Run *fn* with warmup, return timing stats."""
    for _ in range(warmup):
        fn()
    times: list[float] = []
    for _ in range(n):
        start = time.perf_counter()
        fn()
        elapsed = (time.perf_counter() - start) * 1_000  # ms
        times.append(elapsed)
    mean = statistics.mean(times)
    ops_per_sec = 1_000 / mean if mean > 0 else float("inf")
    return {
        "iterations": n,
        "mean_ms": mean,
        "median_ms": statistics.median(times),
        "p50_ms": _percentile(times, 50),
        "p95_ms": _percentile(times, 95),
        "p99_ms": _percentile(times, 99),
        "min_ms": min(times),
        "max_ms": max(times),
        "stdev_ms": statistics.stdev(times) if n > 1 else 0.0,
        "ops_per_sec": ops_per_sec,
    }


def _primes() -> tuple[int, int]:
    numbers = rsa.generate_private_key(PUBLIC_EXPONENT, KEY_SIZE).private_numbers()
    return numbers.p, numbers.q


def _make_key_pair() -> KeyPair:
    p, q = _primes()
    phi = (p - 1) * (q - 1)
    composite = GroupWithKnownOrder(p * q, phi)

    zp, zq = _primes()
    z = zp * zq
    square = GroupWithKnownOrder(z * z, z * (zp - 1) * (zq - 1))

    private_key = PrivateKey(
        composite_group=composite,
        p=p,
        q=q,
        d=Exponent(pow(PUBLIC_EXPONENT, -1, phi)),
        square_group=square,
        x=square.random_exponent().mod(square.order),
    )
    logarithms = [composite.random_exponent().mod(phi) for _ in range(4)]
    return KeyPair.from_private_key(
        private_key,
        e=PUBLIC_EXPONENT,
        ab=composite.random_element(),
        eu=logarithms[0],
        ei=logarithms[1],
        ev=logarithms[2],
        eo=logarithms[3],
        g=square.random_element(),
    )


_KEY_PAIR = None


def _key_pair() -> KeyPair:
    global _KEY_PAIR
    if _KEY_PAIR is None:
        _KEY_PAIR = _make_key_pair()
    return _KEY_PAIR


# ---------------------------------------------------------------------------
# Benchmarks
# ---------------------------------------------------------------------------


def bench_pow_d_crt() -> dict:
    """CRT private exponentiation (2048-bit modulus)."""
    private_key = _key_pair().private_key
    c = private_key.composite_group.random_element()
    return _bench(lambda: private_key.pow_d(c))


def bench_pow_d_direct() -> dict:
    """Plain c^d mod n, the baseline for the CRT speedup."""
    private_key = _key_pair().private_key
    c = private_key.composite_group.random_element()
    return _bench(lambda: c.pow(private_key.d))


def bench_public_key_verification() -> dict:
    """PublicKey construction, which verifies the subgroup proof."""
    fields = _key_pair().public_key.to_fields()
    return _bench(lambda: PublicKey.from_fields(fields), n=50)


def bench_proof_generation() -> dict:
    """Full public key derivation including the subgroup proof."""
    key_pair = _key_pair()
    private_key = key_pair.private_key
    public_key = key_pair.public_key
    ab = private_key.composite_group.element(public_key.ab.value)
    g = private_key.square_group.element(public_key.g.value)
    logarithms = [Exponent(i + 3) for i in range(4)]

    def derive():
        KeyPair.from_private_key(private_key, public_key.e, ab, *logarithms, g=g)

    return _bench(derive, n=50)


def bench_hash() -> dict:
    """Hash of four 2048-bit commitments."""
    group = _key_pair().private_key.composite_group
    values = [group.random_element() for _ in range(4)]
    return _bench(lambda: generate_hash(*values), n=1_000)


def bench_chain_rotation() -> dict:
    """Rotating a key into a chain of twenty keys."""
    private_key = _key_pair().private_key
    now = datetime.now(timezone.utc)
    chain = PrivateKeyChain(
        [KeyChainItem(now - timedelta(days=day), private_key) for day in range(20)]
    )
    activation = now + TROPICAL_YEAR + timedelta(days=1)
    return _bench(lambda: chain.add(activation, private_key, now=now), n=1_000)


def run_all() -> dict:
    """Run all key benchmarks and return results dict."""
    results: dict = {}
    benchmarks = [
        ("pow_d_crt", bench_pow_d_crt),
        ("pow_d_direct", bench_pow_d_direct),
        ("public_key_verification", bench_public_key_verification),
        ("proof_generation", bench_proof_generation),
        ("hash", bench_hash),
        ("chain_rotation", bench_chain_rotation),
    ]
    for name, fn in benchmarks:
        print(f"  Running {name}...", end=" ", flush=True)
        result = fn()
        results[name] = result
        print(f"{result['ops_per_sec']:.0f} ops/sec")
    return results


if __name__ == "__main__":
    print("=== Key Benchmarks ===")
    run_all()
