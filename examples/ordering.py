import numpy as np
from halffloat import Half

A0 = np.random.randn(8).astype(np.float32) * 100
B0 = [Half.from_f32(x) for x in A0] + [Half.NAN, Half.NEG_ZERO, Half.ZERO]

# NaN is unordered, keep it out of the sort.
ordered = sorted(x for x in B0 if not x.is_nan())
print("Sorted  = ", [str(x) for x in ordered])
print("Largest = ", max(ordered))

# -0 and +0 compare equal, but keep their sign bits.
print("-0 == +0: ", Half.NEG_ZERO == Half.ZERO, Half.NEG_ZERO.is_sign_negative())
print("NaN == NaN: ", Half.NAN == Half.NAN)
