#!/usr/bin/env python
from sdk.products import ProductClient, ProductAPIError

def main():
    c = ProductClient(base_url="http://127.0.0.1:3000", token="mysecrettoken")

    print(c.welcome())

    # -----------------------------
    # List seed products
    # -----------------------------
    print("\nListing products...")
    print(c.list_products())

    print("\nKitchen products...")
    print(c.list_products(category="kitchen"))

    print("\nSearching for 'phone'...")
    print(c.list_products(q="phone"))

    # -----------------------------
    # Create, update, delete
    # -----------------------------
    print("\nCreating a product...")
    mouse = c.create_product("Mouse", 25, description="Wireless mouse", category="electronics")
    print(mouse)

    print("\nUpdating its price...")
    print(c.update_product(mouse["id"], price=19))

    print("\nDeleting it...")
    print(c.delete_product(mouse["id"]))

    try:
        c.get_product(mouse["id"])
    except ProductAPIError as e:
        print(f"Lookup after delete: {e}")

    # -----------------------------
    # Writes without the token are rejected
    # -----------------------------
    anonymous = ProductClient(base_url=c.base_url)
    try:
        anonymous.create_product("Ghost", 1)
    except ProductAPIError as e:
        print(f"\nAnonymous create: {e}")

if __name__ == "__main__":
    main()
