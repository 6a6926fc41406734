from rxstate import setup

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Setting up a container")
print("-" * 100)
print()

# A container holds one state value. setup() hands back the three operations you need.
submit, observe_full, select = setup(
    {"user": {"name": "Alice", "age": 30}, "theme": "light", "cart": []}
)

# Observing the whole state replays the current snapshot immediately.
whole = observe_full().subscribe(lambda state: print(f"State is now: {state}"))

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Updating state")
print("-" * 100)
print()

# A mapping overwrites the top-level fields it mentions and keeps the others.
submit({"theme": "dark"})

# A function receives the current state and returns the fields to overwrite.
submit(lambda state: {"cart": state["cart"] + ["apple"]})

# Nested values are replaced, not merged: "age" is gone after this update.
submit({"user": {"name": "Bob"}})

whole.dispose()

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Selecting paths")
print("-" * 100)
print()

# A path view only emits when the value at the path actually changes.
select("user", "name").subscribe(lambda name: print(f"Name changed to: {name}"))

submit({"theme": "light"})  # Nothing printed, the name did not change
submit({"user": {"name": "Bob"}})  # Nothing printed, same name
submit({"user": {"name": "Charlie"}})  # Prints: Name changed to: Charlie

# Paths that do not exist yet stay silent until they are populated.
select("user", "email").subscribe(lambda email: print(f"Email set to: {email}"))

submit(lambda state: {"user": {**state["user"], "email": "charlie@example.com"}})

# None is never delivered to a path view.
submit({"user": {"name": "Charlie", "email": None}})

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Handling errors")
print("-" * 100)
print()


def broken(state):
    return {"total": state["missing"] + 1}


# Errors raised by an update reach the caller; the state is left untouched.
try:
    submit(broken)
except KeyError as error:
    print(f"Update failed with KeyError: {error}")

submit(lambda state: {"cart": state["cart"] + ["pear"]})
select("cart").subscribe(lambda cart: print(f"Cart: {cart}"))
