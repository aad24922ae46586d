"""Tests for resolving a product's category, owner and images."""

from datetime import UTC, datetime

from sqlmodel import Session

from src.catalog.entities import (
    Category,
    CategoryRepository,
    Product,
    ProductImage,
    ProductImageRepository,
    ProductImageTable,
    ProductRepository,
    User,
    UserRepository,
)


class TestCategory:
    def test_resolves_existing_category(
        self, product_repo: ProductRepository, phone: Product, electronics: Category
    ):
        assert product_repo.category(phone) == electronics

    def test_null_key_returns_none(self, product_repo: ProductRepository):
        product = product_repo.create(Product(name="Loose item"))
        assert product_repo.category(product) is None

    def test_dangling_key_returns_none(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
        phone: Product,
    ):
        category_repo.delete(phone.category_id)
        assert product_repo.category(phone) is None

    def test_key_to_unknown_id_returns_none(self, product_repo: ProductRepository):
        product = product_repo.create(Product(name="Orphan", category_id="no-such-id"))
        assert product_repo.category(product) is None

    def test_reads_current_state(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
        phone: Product,
        electronics: Category,
    ):
        """Each call queries the store, so later changes are visible."""
        electronics.name = "Consumer Electronics"
        category_repo.update(electronics)

        category = product_repo.category(phone)
        assert category is not None
        assert category.name == "Consumer Electronics"


class TestOwner:
    def test_resolves_existing_owner(
        self, product_repo: ProductRepository, phone: Product, owner: User
    ):
        assert product_repo.owner(phone) == owner

    def test_null_key_returns_none(self, product_repo: ProductRepository):
        product = product_repo.create(Product(name="Unowned"))
        assert product_repo.owner(product) is None

    def test_dangling_key_returns_none(
        self, product_repo: ProductRepository, user_repo: UserRepository, phone: Product
    ):
        user_repo.delete(phone.user_id)
        assert product_repo.owner(phone) is None


class TestImages:
    def test_no_images(self, product_repo: ProductRepository, phone: Product):
        assert product_repo.images(phone) == []

    def test_returns_exactly_the_product_images(
        self,
        product_repo: ProductRepository,
        image_repo: ProductImageRepository,
        phone: Product,
    ):
        other = product_repo.create(Product(name="Tablet"))
        mine = [
            image_repo.create(ProductImage(product_id=phone.id, path=f"phone-{i}.jpg"))
            for i in range(3)
        ]
        for i in range(4):
            image_repo.create(ProductImage(product_id=other.id, path=f"tablet-{i}.jpg"))

        images = product_repo.images(phone)

        assert {image.id for image in images} == {image.id for image in mine}
        assert all(image.product_id == phone.id for image in images)
        assert len(product_repo.images(other)) == 4

    def test_ordered_by_position(
        self,
        product_repo: ProductRepository,
        image_repo: ProductImageRepository,
        phone: Product,
    ):
        image_repo.create(ProductImage(product_id=phone.id, path="back.jpg", position=2))
        image_repo.create(ProductImage(product_id=phone.id, path="front.jpg", position=0))
        image_repo.create(ProductImage(product_id=phone.id, path="side.jpg", position=1))

        assert [image.path for image in product_repo.images(phone)] == [
            "front.jpg",
            "side.jpg",
            "back.jpg",
        ]

    def test_equal_position_and_timestamp_ordered_by_id(
        self, product_repo: ProductRepository, session: Session, phone: Product
    ):
        stamp = datetime(2024, 1, 1, tzinfo=UTC)
        for image_id, path in (("b", "second.jpg"), ("a", "first.jpg")):
            session.add(
                ProductImageTable(
                    id=image_id,
                    product_id=phone.id,
                    path=path,
                    position=0,
                    created_at=stamp,
                    updated_at=stamp,
                )
            )
        session.flush()

        assert [image.id for image in product_repo.images(phone)] == ["a", "b"]


class TestInverseLookups:
    def test_list_by_category(
        self, product_repo: ProductRepository, phone: Product, electronics: Category
    ):
        product_repo.create(Product(name="Sofa"))

        assert product_repo.list_by_category(electronics.id) == [phone]

    def test_list_by_owner(
        self, product_repo: ProductRepository, phone: Product, owner: User
    ):
        second = product_repo.create(Product(name="Charger", user_id=owner.id))
        product_repo.create(Product(name="Someone else's"))

        assert {p.id for p in product_repo.list_by_owner(owner.id)} == {phone.id, second.id}


def test_example_scenario(session: Session):
    """Category 1, user 7, product 100 with two images."""
    categories = CategoryRepository(session)
    users = UserRepository(session)
    products = ProductRepository(session)
    images = ProductImageRepository(session)

    categories.create(Category(id="1", name="Electronics"))
    users.create(User(id="7", name="Seller"))
    products.create(Product(id="100", category_id="1", user_id="7", name="Phone"))
    images.create(ProductImage(id="1", product_id="100", path="1.jpg"))
    images.create(ProductImage(id="2", product_id="100", path="2.jpg"))
    session.commit()

    product = products.get("100")
    assert product is not None

    category = products.category(product)
    assert category is not None
    assert category.id == "1"
    assert category.name == "Electronics"

    owner = products.owner(product)
    assert owner is not None
    assert owner.id == "7"

    assert {image.id for image in products.images(product)} == {"1", "2"}
