from nextpass import generate_password

def main() -> None:
    password = generate_password()  # uses DEFAULT_CONFIG from config.py
    print(f"Generated password: {password}")

if __name__ == "__main__":
    main()
