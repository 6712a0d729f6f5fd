import numpy as np
from halffloat import Half, serde

# Create a random numpy array in the range [-1000, 1000)
A0 = (np.random.rand(1024) * 2000 - 1000).astype(np.float32)

# Store the array as binary16.
B0 = [Half.from_f32(x) for x in A0]
buf = serde.pack(B0)
print("Stored bytes      : ", len(buf), "vs", A0.nbytes)

# Load it back and widen for computation.
B1 = serde.unpack(buf)
A1 = np.array([x.to_f32() for x in B1], dtype=np.float32)

print("Max abs error     : ", np.max(np.abs(A1 - A0)))
print("Matches numpy fp16: ", np.array_equal(serde.to_ndarray(B1), A0.astype(np.float16)))
