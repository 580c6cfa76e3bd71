from ..models import InsertProduct


def seed_products():
    """Demo catalog loaded into a fresh store."""
    return [
        InsertProduct(
            name="Premium Organic Dog Treats",
            description="All-natural ingredients, perfect for training.",
            price=14.99,
            imageUrl="https://images.unsplash.com/photo-1601758124277-f0086d5ab050",
            category="dog",
            subCategory="food",
            isFeatured=True,
            stock=50,
            rating=4.5,
            reviewCount=42,
        ),
        InsertProduct(
            name="Plush Cat Bed",
            description="Ultra-soft cushioning for ultimate comfort.",
            price=29.99,
            imageUrl="https://images.unsplash.com/photo-1615678815958-5910c6811c25",
            category="cat",
            subCategory="accessory",
            isFeatured=True,
            stock=30,
            rating=4.0,
            reviewCount=28,
        ),
        InsertProduct(
            name="Automatic Fish Feeder",
            description="Programmable feeding times for fish tanks.",
            price=19.99,
            imageUrl="https://images.unsplash.com/photo-1535591273668-578e31182c4f",
            category="fish",
            subCategory="accessory",
            isFeatured=True,
            isOnSale=True,
            salePrice=15.99,
            stock=25,
            rating=5.0,
            reviewCount=56,
        ),
        InsertProduct(
            name="Durable Dog Chew Toy",
            description="Long-lasting rubber toy for aggressive chewers.",
            price=12.99,
            imageUrl="https://images.unsplash.com/photo-1560743641-3914f2c45636",
            category="dog",
            subCategory="toy",
            isFeatured=True,
            stock=45,
            rating=3.5,
            reviewCount=34,
        ),
        InsertProduct(
            name="Interactive Cat Toy",
            description="Feather Wand with Bell to keep your cat entertained.",
            price=12.99,
            imageUrl="https://images.unsplash.com/photo-1573865526739-10659fec78a5",
            category="cat",
            subCategory="toy",
            isFeatured=True,
            stock=40,
            rating=4.2,
            reviewCount=21,
        ),
        InsertProduct(
            name="Premium Dry Dog Food",
            description="5kg bag, Chicken Flavor, nutritionally complete.",
            price=24.99,
            imageUrl="https://images.unsplash.com/photo-1597843786411-a7fa8ad44a95",
            category="dog",
            subCategory="food",
            stock=60,
            rating=4.7,
            reviewCount=38,
        ),
    ]
