"""Known-answer vectors shared by the test modules."""

# Published Firebase sample project parameters
FIREBASE_SIGNER_KEY = (
    "jxspr8Ki0RYycVU8zykbdLGjFQ3McFUH0uiiTvC8pVMXAn210wjLNmdZJzxUECKbm0QsEmYUSDzZvpjeJ9WmXA=="
)
FIREBASE_SALT_SEPARATOR = "Bw=="
FIREBASE_PASSWORD = "user1password"
FIREBASE_SALT = "42xEC+ixf3L2lw=="
FIREBASE_HASH = (
    "lSrfV15cpx95/sZS2W9c9Kp6i/LVgQNDNC/qzrCnh1SAyZvqmZqAjTdn3aoItz+VHjoZilo78198JAdRuid5lQ=="
)

# base64("sig") signer key, rounds 8, mem_cost 14, "secretPass" salted with "salt"
SIG_SIGNER_KEY = "c2ln"
SIG_SALT_SEPARATOR = "Bw=="
SIG_PASSWORD = "secretPass"
SIG_SALT = "c2FsdA=="
SIG_HASH = "tyWV"
