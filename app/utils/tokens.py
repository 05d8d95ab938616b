import hashlib
import secrets

VERIFICATION_CODE_MIN = 100000
VERIFICATION_CODE_MAX = 999999
RESET_TOKEN_BYTES = 20


def generate_verification_code() -> str:
    # 6 位數字驗證碼，寄到信箱
    return str(VERIFICATION_CODE_MIN + secrets.randbelow(VERIFICATION_CODE_MAX - VERIFICATION_CODE_MIN + 1))

def generate_reset_token() -> str:
    # 產生給使用者的原始 token（只會出現在信件連結裡）
    return secrets.token_hex(RESET_TOKEN_BYTES)

def hash_token(token: str) -> str:
    # DB 存 hash，避免 DB 外洩直接拿到 token
    return hashlib.sha256(token.encode("utf-8")).hexdigest()
