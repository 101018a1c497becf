import sys

from auth.identity import create_identity_token


def main(argv: list[str]) -> str:
    # 使い方: python gen_jwt.py <sub> [name] [email]
    user_id = argv[1] if len(argv) > 1 else "dev-user"
    name = argv[2] if len(argv) > 2 else "Dev User"
    email = argv[3] if len(argv) > 3 else "dev@example.com"
    return create_identity_token(user_id, name, email)  # 24時間有効


if __name__ == "__main__":
    print(main(sys.argv))
