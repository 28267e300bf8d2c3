import time
from algorithms.kmp import kmp_build_lps, kmp_find_all


def naive_find_all(t, p):
    return [i for i in range(len(t) - len(p) + 1) if t[i:i + len(p)] == p]


# adversarial for the naive scan: every window almost matches
text = "a" * 200_000
pat = "a" * 50 + "b"

for name, fn in [("KMP", kmp_find_all), ("Naive", naive_find_all)]:
    t0 = time.perf_counter()
    _ = fn(text, pat)
    print(name, "secs:", round(time.perf_counter()-t0, 4))

print("KMP with cached LPS, 100 texts")
lps = kmp_build_lps("abcab")
t0 = time.perf_counter()
for k in range(100):
    kmp_find_all("abcab" * (k + 1), "abcab", lps)
print("secs:", round(time.perf_counter()-t0, 4))
