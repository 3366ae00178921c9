from .env_discount_settings import load_discount_policy as load_discount_policy
