from pwengine import PasswordPolicy, generate_password
from pwengine.strength import strength_bar

def main() -> None:
    result = generate_password(PasswordPolicy.from_env())
    print("\n[Password Generator]")
    print(f"Generated password: {result.password}  {strength_bar(result.strength)}\n")

if __name__ == "__main__":
    main()
