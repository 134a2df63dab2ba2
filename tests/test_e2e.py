from fastapi import status

class TestEndToEnd:
    def test_complete_flow(self, client, owner_data):
        """
        测试完整的端到端流程，包括：
        1. 站点初始化和登录
        2. 标签和文章的创建
        3. 别名冲突和标签删除保护
        4. 公开读取与浏览量
        5. 删除文章后释放别名和标签

        测试步骤：
        1. 初始化站点所有者并登录，获取认证令牌
        2. 创建标签 "go"，创建文章 "a" 并关联该标签（阅读时间 1 分钟）
        3. 再次用别名 "a" 创建文章（应该失败）
        4. 删除标签 "go"（应该失败，有 1 篇文章在使用）
        5. 公开接口读取文章，浏览量加一，归档和标签列表可见
        6. 删除文章，之后标签可以删除，别名 "a" 可以复用
        """
        # 1. 初始化并登录
        assert client.get("/api/site/initialized").json() is False
        response = client.post("/api/site/setup", json=owner_data)
        assert response.status_code == status.HTTP_201_CREATED

        response = client.post("/api/user/login", json={
            "username": owner_data["username"],
            "password": owner_data["password"],
        })
        assert response.status_code == status.HTTP_200_OK
        headers = {"Authorization": f"Bearer {response.json()['access_token']}"}

        # 2. 标签和文章
        response = client.post("/api/admin/tags", json={"name": "go"}, headers=headers)
        assert response.status_code == status.HTTP_201_CREATED
        tag_id = response.json()["id"]
        assert tag_id == 1

        response = client.post("/api/admin/posts", headers=headers, json={
            "title": "A",
            "slug": "a",
            "content": "hello world",
            "status": 1,
            "tag_ids": [tag_id],
        })
        assert response.status_code == status.HTTP_201_CREATED
        post = response.json()
        assert post["read_time"] == 1
        assert [tag["name"] for tag in post["tags"]] == ["go"]

        # 3. 别名冲突
        response = client.post("/api/admin/posts", headers=headers, json={
            "title": "Another A",
            "slug": "a",
            "content": "something else",
        })
        assert response.status_code == status.HTTP_400_BAD_REQUEST

        # 4. 标签正在使用，不能删除
        response = client.delete(f"/api/admin/tags/{tag_id}", headers=headers)
        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert "1 post(s)" in response.json()["detail"]

        # 5. 公开读取
        response = client.get("/api/posts/a")
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["views"] == 1

        tags = client.get("/api/tags").json()
        assert tags == [{
            "id": tag_id,
            "name": "go",
            "post_count": 1,
            "create_time": tags[0]["create_time"],
        }]
        archive = client.get("/api/posts/archive").json()
        assert archive[0]["total"] == 1
        assert archive[0]["months"][0]["posts"][0]["slug"] == "a"

        info = client.get("/api/site/info").json()
        assert info["stats"]["published_post_count"] == 1
        assert info["stats"]["used_tag_count"] == 1

        # 6. 删除文章后再删除标签
        response = client.delete(f"/api/admin/posts/{post['id']}", headers=headers)
        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert client.get("/api/posts/a").status_code == status.HTTP_404_NOT_FOUND

        response = client.delete(f"/api/admin/tags/{tag_id}", headers=headers)
        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert client.get("/api/tags").json() == []

        response = client.post("/api/admin/posts", headers=headers, json={
            "title": "A again",
            "slug": "a",
            "content": "hello again",
        })
        assert response.status_code == status.HTTP_201_CREATED
        assert client.get("/api/posts/archive").json() == []
