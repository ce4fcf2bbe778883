from rest_framework import serializers


class CartItemRequestSerializer(serializers.Serializer):
    product_id = serializers.IntegerField(min_value=1)


class CartItemSerializer(serializers.Serializer):
    cart_item_id = serializers.IntegerField()
    product_id = serializers.IntegerField()
    quantity = serializers.IntegerField()
    name = serializers.CharField()
    price = serializers.CharField()
    image = serializers.CharField()


class CartChangeSerializer(serializers.Serializer):
    message = serializers.CharField()
    product_id = serializers.IntegerField()
    quantity = serializers.IntegerField()
