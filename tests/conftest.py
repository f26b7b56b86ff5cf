from config import ApplicationConfig

# Minimum bcrypt cost keeps password hashing fast under test
ApplicationConfig.BCRYPT_ROUNDS = 4
