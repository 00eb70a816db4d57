import hashlib


def hash_to_percentage(key: str) -> int:
    """把任意字符串稳定地映射到 [0, 100) 的整数桶位。

    只依赖 SHA-256，不受进程重启或 PYTHONHASHSEED 影响。
    """
    digest = hashlib.sha256(key.encode("utf-8")).digest()
    value = int.from_bytes(digest[:4], "little", signed=True)
    return abs(value) % 100
