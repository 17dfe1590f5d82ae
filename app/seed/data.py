"""Fixed seed dataset for the catalog."""

from app.catalog.models import Gender, Size
from app.catalog.schemas import ProductCreate

SEED_PRODUCTS: list[ProductCreate] = [
    ProductCreate(
        title="Men's Chill Crew Neck Sweatshirt",
        description="Introducing the Tesla Chill Collection. The Men's Chill Crew Neck Sweatshirt has a premium, heavyweight exterior and soft fleece interior for comfort in any season.",
        price=75,
        stock=7,
        sizes=[Size.XS, Size.S, Size.M, Size.L, Size.XL, Size.XXL],
        gender=Gender.MEN,
        tags=["sweatshirt"],
        images=["1740176-00-A_0_2000.jpg", "1740176-00-A_1.jpg"],
    ),
    ProductCreate(
        title="Men's Quilted Shirt Jacket",
        description="The Men's Quilted Shirt Jacket features a uniquely fit, quilted design for warmth and mobility in cold weather seasons.",
        price=200,
        stock=5,
        sizes=[Size.XS, Size.S, Size.M, Size.XL, Size.XXL],
        gender=Gender.MEN,
        tags=["jacket"],
        images=["1740507-00-A_0_2000.jpg", "1740507-00-A_1.jpg"],
    ),
    ProductCreate(
        title="Men's Raven Lightweight Zip Up Bomber Jacket",
        description="Introducing the Tesla Raven Collection. The Men's Raven Lightweight Zip Up Bomber has a premium, modern silhouette made from a sustainable bamboo cotton blend.",
        price=130,
        stock=10,
        sizes=[Size.S, Size.M, Size.L, Size.XL, Size.XXL],
        gender=Gender.MEN,
        tags=["shirt"],
        images=["1740250-00-A_0_2000.jpg", "1740250-00-A_1.jpg"],
    ),
    ProductCreate(
        title="Men's Turbine Long Sleeve Tee",
        description="Introducing the Tesla Turbine Collection. Designed for style, comfort and everyday lifestyle, the Men's Turbine Long Sleeve Tee features a subtle, water-based T logo.",
        price=45,
        stock=50,
        sizes=[Size.XS, Size.S, Size.M, Size.L],
        gender=Gender.MEN,
        tags=["shirt"],
        images=["1740280-00-A_0_2000.jpg", "1740280-00-A_1.jpg"],
    ),
    ProductCreate(
        title="Women's Cropped Puffer Jacket",
        description="The Women's Cropped Puffer Jacket features a uniquely cropped silhouette for the perfect, modern style while on the go.",
        price=225,
        stock=85,
        sizes=[Size.XS, Size.S, Size.M],
        gender=Gender.WOMEN,
        tags=["hoodie"],
        images=["1740535-00-A_0_2000.jpg", "1740535-00-A_1.jpg"],
    ),
    ProductCreate(
        title="Women's Chill Half Zip Cropped Hoodie",
        description="Introducing the Tesla Chill Collection. The Women's Chill Half Zip Cropped Hoodie has a premium, soft fleece exterior and cropped silhouette for comfort in everyday lifestyle.",
        price=130,
        stock=10,
        sizes=[Size.XS, Size.S, Size.M, Size.L, Size.XL, Size.XXL],
        gender=Gender.WOMEN,
        tags=["hoodie"],
        images=["1740226-00-A_0_2000.jpg", "1740226-00-A_1.jpg"],
    ),
    ProductCreate(
        title="Kids Cybertruck Long Sleeve Tee",
        description="Designed for fit, comfort and style, the Tesla Cybertruck Long Sleeve Tee is made from 100% cotton and features a Cybertruck graphic.",
        price=30,
        stock=10,
        sizes=[Size.XS, Size.S, Size.M],
        gender=Gender.KID,
        tags=["shirt"],
        images=["1742693-00-A_0_2000.jpg", "1742693-00-A_1.jpg"],
    ),
    ProductCreate(
        title="Kids Racing Stripe Tee",
        description="The Kids Racing Stripe Tee is made from 100% organic cotton and features a racing stripe graphic across the chest.",
        price=30,
        stock=10,
        sizes=[Size.XS, Size.S, Size.M],
        gender=Gender.KID,
        tags=["shirt"],
        images=["1742695-00-A_0_2000.jpg", "1742695-00-A_1.jpg"],
    ),
    ProductCreate(
        title="Made on Earth by Humans Onesie",
        description="Show your commitment to sustainable energy with this cheeky onesie for your young one.",
        price=40,
        stock=12,
        sizes=[Size.XS, Size.S],
        gender=Gender.KID,
        tags=["shirt"],
        images=["1473809-00-A_1_2000.jpg", "1473829-00-A_2_2000.jpg"],
    ),
    ProductCreate(
        title="Relaxed T Logo Hat",
        description="The Relaxed T Logo Hat is a classic silhouette combined with modern details, featuring a 3D T logo and a custom metal buckle closure.",
        price=30,
        stock=10,
        sizes=[],
        gender=Gender.UNISEX,
        tags=["hat"],
        images=["1657932-00-A_0_2000.jpg", "1657932-00-A_1.jpg"],
    ),
]
