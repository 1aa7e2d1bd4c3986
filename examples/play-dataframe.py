from tinyframe import DataFrame

df = DataFrame.from_records([
    {"Product": "Videogame", "Quantity": 8, "Price": 66.5},
    {"Product": "Laptop", "Quantity": 8, "Price": 38.72},
    {"Product": "Laptop", "Quantity": 7, "Price": 77.46},
    {"Product": "Phone", "Price": 12.0},
])

df["Total"] = df["Quantity"] * df["Price"]

print(df)
print()
print(df.tabulate())
