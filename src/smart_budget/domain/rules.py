from smart_budget.models import CategoryRule

# Evaluated top to bottom; the first rule with a keyword contained in the
# lower-cased text wins. More specific rules must come before broader ones
# ("uber eats" before "uber").
DEFAULT_RULES: tuple[CategoryRule, ...] = (
    # Food
    CategoryRule(category="Food", subcategory="Food Delivery",
                 keywords=("swiggy", "zomato", "uber eats")),
    CategoryRule(category="Food", subcategory="Pizza", keywords=("pizza", "dominos")),
    CategoryRule(category="Food", subcategory="Fast Food",
                 keywords=("burger", "kfc", "mcdonald", "subway")),
    CategoryRule(category="Food", subcategory="South Indian", keywords=("dosa", "idli")),
    CategoryRule(category="Food", subcategory="Beverages",
                 keywords=("coffee", "starbucks", "chai", "cafe")),
    CategoryRule(category="Food", subcategory="Dining",
                 keywords=("restaurant", "dining", "meal", "food")),

    # Transport
    CategoryRule(category="Transport", subcategory="Cab",
                 keywords=("uber", "ola cabs", "olacabs", "rapido", "taxi", "cab ride",
                           "cab fare")),
    CategoryRule(category="Transport", subcategory="Fuel",
                 keywords=("petrol", "diesel", "fuel", "indian oil", "hpcl", "bpcl")),
    CategoryRule(category="Transport", subcategory="Public Transport",
                 keywords=("metro", "railway", "irctc", "bus pass")),
    CategoryRule(category="Transport", subcategory="Parking", keywords=("parking",)),

    # Shopping
    CategoryRule(category="Shopping", subcategory="Online",
                 keywords=("amazon", "flipkart", "myntra", "ajio", "meesho")),
    CategoryRule(category="Shopping", subcategory="Groceries",
                 keywords=("bigbasket", "blinkit", "zepto", "dmart", "grofers", "grocery")),
    CategoryRule(category="Shopping", subcategory="Retail",
                 keywords=("store", "shopping mall", "retail", "fashion", "apparel",
                           "electronics")),

    # Bills
    CategoryRule(category="Bills", subcategory="Electricity",
                 keywords=("electricity", "bescom", "power bill")),
    CategoryRule(category="Bills", subcategory="Internet & Mobile",
                 keywords=("wifi", "broadband", "recharge", "airtel", "jio", "bsnl",
                           "postpaid", "prepaid")),
    CategoryRule(category="Bills", subcategory="Rent",
                 keywords=("house rent", "flat rent", "rent payment", "monthly rent")),
    CategoryRule(category="Bills", subcategory="Water", keywords=("water bill",)),

    # Entertainment
    CategoryRule(category="Entertainment", subcategory="Streaming",
                 keywords=("netflix", "hotstar", "spotify", "prime video", "disney")),
    CategoryRule(category="Entertainment", subcategory="Movies",
                 keywords=("cinema", "pvr", "inox", "bookmyshow", "movie")),

    # Health
    CategoryRule(category="Insurance", subcategory=None,
                 keywords=("insurance", "lic premium", "policy premium")),
    CategoryRule(category="Healthcare", subcategory="Pharmacy",
                 keywords=("pharmacy", "1mg", "medlife", "medicine", "medical")),
    CategoryRule(category="Healthcare", subcategory="Hospital",
                 keywords=("hospital", "clinic", "apollo", "doctor")),

    # Education and travel
    CategoryRule(category="Education", subcategory=None,
                 keywords=("school", "college", "tuition", "udemy", "coursera", "course")),
    CategoryRule(category="Travel", subcategory=None,
                 keywords=("flight", "hotel", "makemytrip", "goibibo", "airbnb", "oyo rooms")),

    # Money movement
    CategoryRule(category="Investment", subcategory=None,
                 keywords=("mutual fund", "zerodha", "groww", "upstox", "stock")),
    CategoryRule(category="Taxes", subcategory=None,
                 keywords=("income tax", "gst", "property tax")),
    CategoryRule(category="Gifts & Charity", subcategory=None,
                 keywords=("donation", "charity", "gift")),
    CategoryRule(category="Income", subcategory="Salary", keywords=("salary", "payroll")),
    CategoryRule(category="Income", subcategory="Refund", keywords=("refund", "cashback")),
)
