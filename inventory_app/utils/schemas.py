from marshmallow import Schema, fields, validate, EXCLUDE
from inventory_app.models import MovementType, UserRole


class MovementRequestSchema(Schema):
    """Schema for registering a stock movement"""
    class Meta:
        unknown = EXCLUDE

    productId = fields.Str(required=True, validate=validate.Length(min=1))
    type = fields.Str(
        required=True,
        validate=validate.OneOf([mt.value for mt in MovementType])
    )
    quantity = fields.Int(required=True, strict=True, validate=validate.Range(min=1))
    reason = fields.Str(validate=validate.Length(max=500), allow_none=True, load_default='')


class MovementQuerySchema(Schema):
    class Meta:
        unknown = EXCLUDE

    productId = fields.Str(validate=validate.Length(min=1))


class ProductCreateSchema(Schema):
    """Schema for creating products"""
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True, validate=validate.Length(min=1, max=200))
    category = fields.Str(required=True, validate=validate.Length(min=1, max=100))
    price = fields.Float(required=True, validate=validate.Range(min=0))
    stock = fields.Int(strict=True, validate=validate.Range(min=0), load_default=0)
    minStock = fields.Int(strict=True, validate=validate.Range(min=0), load_default=0)
    description = fields.Str(validate=validate.Length(max=500), allow_none=True)


class ProductUpdateSchema(Schema):
    """Partial product update; stock is checked by the service"""
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(validate=validate.Length(min=1, max=200))
    category = fields.Str(validate=validate.Length(min=1, max=100))
    price = fields.Float(validate=validate.Range(min=0))
    stock = fields.Int(strict=True, validate=validate.Range(min=0))
    minStock = fields.Int(strict=True, validate=validate.Range(min=0))
    description = fields.Str(validate=validate.Length(max=500), allow_none=True)


class UserCreateSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    id = fields.Str(validate=validate.Length(min=1, max=255))
    email = fields.Email(required=True)
    name = fields.Str(required=True, validate=validate.Length(min=1, max=200))
    role = fields.Str(
        validate=validate.OneOf([role.value for role in UserRole]),
        load_default=UserRole.EMPLOYEE.value
    )


class UserUpdateSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    email = fields.Email()
    name = fields.Str(validate=validate.Length(min=1, max=200))
    role = fields.Str(validate=validate.OneOf([role.value for role in UserRole]))
    isActive = fields.Bool()
